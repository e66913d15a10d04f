"""
PropertyMap - sorted, read-only mapping of property name to display text.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Tuple, Union

from objcompare.comparison.exceptions import InvalidArgumentError

# Literal placeholder used in place of an absent value
NULL_MARKER = "<null>"


class PropertyMap(Mapping):
    """
    Mapping of property name to display text, iterated in ascending key order.

    Keys are compared ordinally (by code point), so ordering is case-sensitive
    and independent of locale. Values are always strings: absence must be
    encoded with NULL_MARKER before it reaches the map.
    """

    def __init__(self, items: Union[Mapping, Iterable[Tuple[str, str]], None] = None):
        self._data: Dict[str, str] = {}

        if items is None:
            pairs: Iterable[Tuple[str, str]] = ()
        elif isinstance(items, Mapping):
            pairs = items.items()
        else:
            pairs = items

        for key, value in pairs:
            if key in self._data:
                raise InvalidArgumentError(f"Duplicate property name: {key!r}")
            self._data[self._check_key(key)] = self._check_value(key, value)

        self._keys: List[str] = sorted(self._data)

    @staticmethod
    def _check_key(key: Any) -> str:
        if not isinstance(key, str):
            raise InvalidArgumentError(f"Property name must be a string, got {type(key).__name__}")
        return key

    @staticmethod
    def _check_value(key: str, value: Any) -> str:
        if value is None:
            raise InvalidArgumentError(
                f"Property {key!r} has no value; use NULL_MARKER for absent values"
            )
        if not isinstance(value, str):
            raise InvalidArgumentError(
                f"Property {key!r} must map to a string, got {type(value).__name__}"
            )
        return value

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {self._data[k]!r}" for k in self._keys)
        return f"PropertyMap({{{body}}})"

    def key_list(self) -> List[str]:
        """Return a copy of the keys in ascending order."""
        return list(self._keys)
