"""
Merge Aligner - pair the rows of two AlignedTables by property name.

Walks both tables' key orders like a sorted merge join. Keys present on both
sides share a row; a key present on one side only gets blank filler on the
other side so both columns stay the same width.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Optional

from objcompare.comparison.aligned_table import TABLE_GAP, AlignedTable
from objcompare.comparison.exceptions import InvalidArgumentError
from objcompare.comparison.padding import blank
from objcompare.utils.logger import log_operation

logger = logging.getLogger(__name__)


class RowSide(Enum):
    """Which table(s) contributed a merged row."""

    HEADER = "header"
    BOTH = "both"
    LEFT_ONLY = "left_only"
    RIGHT_ONLY = "right_only"


@dataclass(frozen=True)
class MergedRow:
    """One display row: left table text and right table text."""

    left: str
    right: str
    side: RowSide = RowSide.BOTH
    key: Optional[str] = None

    def render(self, gap: int = TABLE_GAP) -> str:
        """Join both columns with ``gap`` spaces."""
        return self.left + blank(gap) + self.right


class _Cursor:
    """Position in one table's key order."""

    def __init__(self, table: AlignedTable):
        self.table = table
        self.index = 0

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.table)

    def current(self) -> Optional[str]:
        if self.exhausted:
            return None
        return self.table.key_at(self.index)

    def advance(self) -> None:
        self.index += 1


def compare_keys(left_key: Optional[str], right_key: Optional[str]) -> int:
    """
    Order two cursor keys, ignoring surrounding whitespace.

    ``None`` marks an exhausted cursor and sorts after every real key,
    including the empty key produced for primitive values.

    Returns:
        -1, 0 or 1
    """
    if left_key is None and right_key is None:
        return 0
    if left_key is None:
        return 1
    if right_key is None:
        return -1

    left_trimmed = left_key.strip()
    right_trimmed = right_key.strip()
    if left_trimmed < right_trimmed:
        return -1
    if left_trimmed > right_trimmed:
        return 1
    return 0


def align(
    left: AlignedTable, right: AlignedTable, include_headers: bool = True
) -> Iterator[MergedRow]:
    """
    Merge two tables into paired display rows.

    With headers enabled, the header row and the separator row come first.
    Then both key orders are walked together: each step emits one row and
    advances at least one cursor, so the walk ends after at most
    ``len(left) + len(right)`` steps. Every key of either table appears in
    exactly one row, in its own column.

    Args:
        left: Left-hand table
        right: Right-hand table
        include_headers: Emit header and separator rows first

    Yields:
        MergedRow per display line
    """
    if include_headers:
        yield MergedRow(left.get_header(), right.get_header(), RowSide.HEADER)
        yield MergedRow(left.get_header_separator(), right.get_header_separator(), RowSide.HEADER)

    left_cursor = _Cursor(left)
    right_cursor = _Cursor(right)

    while not (left_cursor.exhausted and right_cursor.exhausted):
        left_key = left_cursor.current()
        right_key = right_cursor.current()
        cmp = compare_keys(left_key, right_key)

        if cmp == 0:
            yield MergedRow(left.get_pair(left_key), right.get_pair(right_key), RowSide.BOTH, left_key)
            left_cursor.advance()
            right_cursor.advance()
        elif cmp < 0:
            yield MergedRow(
                left.get_pair(left_key), blank(right.display_width), RowSide.LEFT_ONLY, left_key
            )
            left_cursor.advance()
        else:
            yield MergedRow(
                blank(left.display_width), right.get_pair(right_key), RowSide.RIGHT_ONLY, right_key
            )
            right_cursor.advance()


def write_rows(
    rows: Iterable[MergedRow], writer: Callable[[str], Any], gap: int = TABLE_GAP
) -> int:
    """
    Render rows and hand each line to ``writer``.

    Args:
        rows: Rows from align()
        writer: Line sink, e.g. ``print`` or ``list.append``
        gap: Spaces between the two columns

    Returns:
        Number of lines written
    """
    count = 0
    for row in rows:
        writer(row.render(gap))
        count += 1
    return count


@log_operation("compare_objects")
def compare(
    left_obj: Any,
    right_obj: Any,
    writer: Callable[[str], Any],
    left_label: Optional[str] = None,
    right_label: Optional[str] = None,
    include_headers: bool = True,
    gap: int = TABLE_GAP,
) -> int:
    """
    Flatten two objects and write their side-by-side comparison.

    Args:
        left_obj: Left object (not None)
        right_obj: Right object (not None)
        writer: Line sink
        left_label: Left header (defaults to the left type name)
        right_label: Right header (defaults to the right type name)
        include_headers: Write header and separator rows
        gap: Spaces between the two tables

    Returns:
        Number of lines written

    Raises:
        InvalidArgumentError: If either object is None or gap is negative
    """
    left = AlignedTable.from_object(left_obj, left_label)
    right = AlignedTable.from_object(right_obj, right_label)
    if gap < 0:
        raise InvalidArgumentError(f"Table gap must be >= 0, got {gap}")

    written = write_rows(align(left, right, include_headers), writer, gap)
    logger.debug(f"Compared {left.source_label} with {right.source_label}: {written} lines")
    return written
