"""
Sample object pairs for demonstrating side-by-side comparison.

Each sample builds a fresh pair of objects when requested, so time-based
samples show the current time.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple

from objcompare.comparison.exceptions import InvalidArgumentError
from objcompare.domain.subject import ComparisonSubject
from objcompare.utils.timezone import now_kst, now_utc


@dataclass
class ContactRecord:
    """Contact record as stored by an older address book."""

    name: str
    phone: str
    tags: List[str] = field(default_factory=list)


@dataclass
class ContactProfile:
    """Contact record as stored by a newer address book."""

    name: str
    email: Optional[str]
    phones: List[str] = field(default_factory=list)
    tags: Optional[List[str]] = None


@dataclass(frozen=True)
class Sample:
    """
    A named pair of objects to compare.

    Attributes:
        name: Sample identifier used on the command line
        description: One-line description
        left_label: Header of the left table
        right_label: Header of the right table
        factory: Callable returning (left_obj, right_obj)
    """

    name: str
    description: str
    left_label: str
    right_label: str
    factory: Callable[[], tuple]

    def build(self) -> tuple:
        """Build both subjects of this sample."""
        left_obj, right_obj = self.factory()
        return (
            ComparisonSubject.capture(left_obj, self.left_label),
            ComparisonSubject.capture(right_obj, self.right_label),
        )


def _datetime_pair() -> tuple:
    return now_utc(aware=False), now_kst(aware=True)


def _date_pair() -> tuple:
    current = now_kst(aware=True)
    return current, current.date()


def _contact_pair() -> tuple:
    record = ContactRecord(name="Kim Minji", phone="010-1234-5678", tags=["vip"])
    profile = ContactProfile(
        name="Kim Minji",
        email=None,
        phones=["010-1234-5678", "02-555-0100"],
    )
    return record, profile


SAMPLES: Dict[str, Sample] = {
    sample.name: sample
    for sample in (
        Sample(
            name="datetime",
            description="Naive UTC datetime vs timezone-aware KST datetime",
            left_label="datetime (UTC, naive)",
            right_label="datetime (KST, aware)",
            factory=_datetime_pair,
        ),
        Sample(
            name="date",
            description="Aware datetime vs its calendar date",
            left_label="datetime",
            right_label=date.__name__,
            factory=_date_pair,
        ),
        Sample(
            name="contact",
            description="Old contact record vs new contact profile",
            left_label=ContactRecord.__name__,
            right_label=ContactProfile.__name__,
            factory=_contact_pair,
        ),
    )
}


def get_sample(name: str) -> Sample:
    """
    Look up a sample by name.

    Raises:
        InvalidArgumentError: If no sample has that name
    """
    try:
        return SAMPLES[name]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown sample {name!r}. Available: {', '.join(sorted(SAMPLES))}"
        ) from None


def sample_names() -> List[str]:
    return sorted(SAMPLES)


def build_sample(name: str) -> Tuple[ComparisonSubject, ComparisonSubject]:
    """Build the (left, right) ComparisonSubject pair of a named sample."""
    return get_sample(name).build()
