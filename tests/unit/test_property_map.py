"""
Unit tests for PropertyMap (objcompare/comparison/property_map.py)
"""

import pytest

from objcompare.comparison.exceptions import InvalidArgumentError
from objcompare.comparison.property_map import NULL_MARKER, PropertyMap


class TestOrdering:
    """Keys iterate in ascending ordinal order."""

    def test_keys_sorted_regardless_of_insertion_order(self):
        props = PropertyMap({"Year": "2025", "Day": "2", "Month": "1"})
        assert list(props) == ["Day", "Month", "Year"]

    def test_ordering_is_case_sensitive_ordinal(self):
        """Upper-case letters sort before lower-case ones."""
        props = PropertyMap({"beta": "1", "alpha": "2", "Alpha": "3", "_x": "4"})
        assert list(props) == ["Alpha", "_x", "alpha", "beta"]

    def test_empty_key_sorts_first(self):
        props = PropertyMap({"a": "1", "": "2"})
        assert list(props) == ["", "a"]

    def test_key_list_is_a_copy(self):
        props = PropertyMap({"b": "1", "a": "2"})
        keys = props.key_list()
        keys.append("z")
        assert props.key_list() == ["a", "b"]


class TestContents:
    """Mapping behaviour and value validation."""

    def test_mapping_access(self):
        props = PropertyMap([("Kind", "Utc"), ("Ticks", "42")])
        assert props["Kind"] == "Utc"
        assert len(props) == 2
        assert "Ticks" in props
        assert props.get("Missing") is None

    def test_equal_to_plain_dict(self):
        assert PropertyMap({"A": "1"}) == {"A": "1"}

    def test_empty_map(self):
        props = PropertyMap()
        assert len(props) == 0
        assert list(props) == []

    def test_none_value_rejected(self):
        """Absent values must be spelled with the null marker."""
        with pytest.raises(InvalidArgumentError):
            PropertyMap({"Other": None})

    def test_null_marker_accepted(self):
        props = PropertyMap({"Other": NULL_MARKER})
        assert props["Other"] == "<null>"

    def test_non_string_value_rejected(self):
        with pytest.raises(InvalidArgumentError):
            PropertyMap({"Count": 3})

    def test_non_string_key_rejected(self):
        with pytest.raises(InvalidArgumentError):
            PropertyMap({1: "one"})

    def test_duplicate_pair_rejected(self):
        with pytest.raises(InvalidArgumentError):
            PropertyMap([("A", "1"), ("A", "2")])

    def test_repr_lists_sorted_entries(self):
        assert repr(PropertyMap({"b": "2", "a": "1"})) == "PropertyMap({'a': '1', 'b': '2'})"
