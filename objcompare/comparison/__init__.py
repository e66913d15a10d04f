"""Object comparison core - flattening, aligned tables and the merge aligner."""

from .exceptions import IndexOutOfRangeError, InvalidArgumentError, ObjectCompareError
from .property_map import NULL_MARKER, PropertyMap
from .padding import blank, pad
from .flattener import (
    FieldDescriptor,
    FieldKind,
    flatten,
    list_fields,
    register_schema,
    unregister_schema,
)
from .aligned_table import COLUMN_GAP, TABLE_GAP, AlignedTable
from .merge_aligner import MergedRow, RowSide, align, compare, write_rows
from .stringify import stringify

__all__ = [
    "AlignedTable",
    "COLUMN_GAP",
    "FieldDescriptor",
    "FieldKind",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "MergedRow",
    "NULL_MARKER",
    "ObjectCompareError",
    "PropertyMap",
    "RowSide",
    "TABLE_GAP",
    "align",
    "blank",
    "compare",
    "flatten",
    "list_fields",
    "pad",
    "register_schema",
    "stringify",
    "unregister_schema",
    "write_rows",
]
