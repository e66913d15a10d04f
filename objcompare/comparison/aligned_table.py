"""
AlignedTable - a PropertyMap with column metrics and fixed-width accessors.

Keys and values are stored unpadded so lookups stay exact; padding is
applied only when text is requested for display.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from objcompare.comparison.exceptions import IndexOutOfRangeError
from objcompare.comparison.flattener import flatten
from objcompare.comparison.padding import pad
from objcompare.comparison.property_map import PropertyMap

logger = logging.getLogger(__name__)

# Spaces between the key column and the value column of one table
COLUMN_GAP = 1

# Spaces between two tables rendered side by side
TABLE_GAP = 4


class AlignedTable:
    """
    Property names and values of one object, laid out as a two-column table.

    Attributes:
        source_label: Human name of the originating type (used as header)
        max_key_width: Longest key length (0 when empty)
        max_value_width: Longest value length (0 when empty)
        column_gap: Width of the key/value separator (COLUMN_GAP)

    Example:
        >>> table = AlignedTable("Point", PropertyMap({"x": "1", "y": "20"}))
        >>> table.get_pair("x")
        'x 1 '
        >>> table.display_width
        4
    """

    column_gap = COLUMN_GAP

    def __init__(self, source_label: str = "", property_map: Optional[PropertyMap] = None):
        self.source_label = ""
        self.max_key_width = 0
        self.max_value_width = 0
        self._values = PropertyMap()
        self._keys: List[str] = []
        self._stripped: Dict[str, str] = {}
        self.initialize(source_label, property_map)

    @classmethod
    def from_object(cls, instance: Any, label: Optional[str] = None) -> "AlignedTable":
        """
        Flatten an object and build its table.

        Args:
            instance: Object to flatten (not None)
            label: Header label (defaults to the instance's type name)

        Raises:
            InvalidArgumentError: If instance is None
        """
        property_map = flatten(instance)
        return cls(label if label is not None else type(instance).__name__, property_map)

    def initialize(self, source_label: str, property_map: Optional[PropertyMap] = None) -> None:
        """
        Replace the table contents and recompute column metrics.

        Args:
            source_label: Header label
            property_map: Properties to display (None means empty)
        """
        if property_map is None:
            property_map = PropertyMap()
        elif not isinstance(property_map, PropertyMap):
            property_map = PropertyMap(property_map)

        self.source_label = source_label or ""
        self._values = property_map
        # trimmed order matches the merge comparison; raw key breaks ties
        self._keys = sorted(property_map.key_list(), key=lambda key: (key.strip(), key))
        self._stripped = {}
        self.max_key_width = 0
        self.max_value_width = 0

        for key in self._keys:
            value = property_map[key]
            if len(key) > self.max_key_width:
                self.max_key_width = len(key)
            if len(value) > self.max_value_width:
                self.max_value_width = len(value)
            self._stripped.setdefault(key.strip(), key)

        logger.debug(
            f"Initialized table {self.source_label!r}: {len(self._keys)} keys, "
            f"key width {self.max_key_width}, value width {self.max_value_width}"
        )

    @property
    def display_width(self) -> int:
        """Horizontal footprint of one rendered row."""
        return self.max_key_width + self.column_gap + self.max_value_width

    @property
    def keys(self) -> List[str]:
        """Keys in ascending trimmed order (copy)."""
        return list(self._keys)

    @property
    def length(self) -> int:
        return len(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains_key(key)

    def __repr__(self) -> str:
        return f"AlignedTable({self.source_label!r}, {len(self._keys)} keys)"

    def contains_key(self, key: str) -> bool:
        """Check for a key, ignoring surrounding whitespace."""
        return key.strip() in self._stripped

    def _canonical_key(self, key: str) -> Optional[str]:
        return self._stripped.get(key.strip())

    def lookup(self, key: str) -> str:
        """
        Get the unpadded value for a key, ignoring surrounding whitespace.

        Returns:
            The value, or "" when the key is not present
        """
        canonical = self._canonical_key(key)
        if canonical is None:
            return ""
        return self._values[canonical]

    def get_header(self) -> str:
        """Source label fitted to the display width."""
        return pad(self.source_label, self.display_width)

    def get_header_separator(self) -> str:
        """Dashes spanning the display width."""
        return "-" * self.display_width

    def padded_key(self, key: str) -> str:
        canonical = self._canonical_key(key)
        return pad(canonical if canonical is not None else key.strip(), self.max_key_width)

    def padded_value(self, key: str) -> str:
        return pad(self.lookup(key), self.max_value_width)

    def get_pair(self, key: str) -> str:
        """
        Render one key/value row of this table.

        The canonical stored key is used (not the caller's spelling), so rows
        of the same table always line up.

        Returns:
            Padded key, column gap and padded value; exactly display_width long
        """
        return self.padded_key(key) + " " * self.column_gap + self.padded_value(key)

    def key_at(self, index: int) -> str:
        """
        Get the key at a position of the ascending key order.

        Raises:
            IndexOutOfRangeError: If index is outside [0, length)
        """
        if index < 0 or index >= len(self._keys):
            raise IndexOutOfRangeError(
                f"Key index {index} out of range for table {self.source_label!r} "
                f"with {len(self._keys)} keys"
            )
        return self._keys[index]

    def to_property_map(self) -> PropertyMap:
        """Return the underlying (unpadded) PropertyMap."""
        return self._values
