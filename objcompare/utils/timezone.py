"""
Timezone utilities for the sample comparisons.

Provides the current time as a naive UTC value and as a timezone-aware
Korea Standard Time (KST) value, the two shapes the datetime samples put
side by side.
"""

from datetime import datetime, timedelta, timezone

# Reusable timezone instance for KST (UTC+9)
KST = timezone(timedelta(hours=9), "KST")


def now_utc(aware: bool = False) -> datetime:
    """
    Return the current time in UTC.

    Args:
        aware: When True, keep tzinfo=UTC. When False (default), return a
            naive datetime, like a timestamp read from a system without
            offset information.
    """
    current = datetime.now(timezone.utc)
    return current if aware else current.replace(tzinfo=None)


def now_kst(aware: bool = True) -> datetime:
    """
    Return the current time in Korea Standard Time (KST).

    Args:
        aware: When True (default), returns a timezone-aware datetime. When
            False, returns a naive datetime stripped of tzinfo.

    Returns:
        datetime: Current time in KST.
    """
    current = datetime.now(timezone.utc).astimezone(KST)
    return current if aware else current.replace(tzinfo=None)
