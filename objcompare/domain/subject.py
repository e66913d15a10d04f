"""
ComparisonSubject domain model.

Snapshot of one object taken for comparison: its type and its flattened
top-level property values.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from objcompare.comparison.aligned_table import AlignedTable
from objcompare.comparison.exceptions import InvalidArgumentError
from objcompare.comparison.flattener import flatten
from objcompare.comparison.property_map import PropertyMap


@dataclass(frozen=True)
class ComparisonSubject:
    """
    An object under comparison.

    Attributes:
        data_type: Runtime type of the captured instance
        values: Flattened property values at capture time
        label: Display label (defaults to the type name)
    """

    data_type: type
    values: PropertyMap
    label: str = field(default="")

    @classmethod
    def capture(cls, instance: Any, label: Optional[str] = None) -> "ComparisonSubject":
        """
        Capture an instance's current property values.

        Args:
            instance: Object to capture (not None)
            label: Optional display label

        Raises:
            InvalidArgumentError: If instance is None
        """
        if instance is None:
            raise InvalidArgumentError("instance must not be None")

        data_type = type(instance)
        return cls(
            data_type=data_type,
            values=flatten(instance),
            label=label if label is not None else data_type.__name__,
        )

    @property
    def type_name(self) -> str:
        return self.data_type.__name__

    def to_table(self) -> AlignedTable:
        """Build the aligned table for this snapshot."""
        return AlignedTable(self.label or self.type_name, self.values)
