"""Fixed-width text helpers used when rendering aligned tables."""

from objcompare.comparison.exceptions import InvalidArgumentError


def pad(text: str, width: int) -> str:
    """
    Fit text into exactly ``width`` characters.

    Text longer than ``width`` is truncated; shorter text is right-padded
    with ASCII spaces.

    Args:
        text: Text to fit
        width: Target width (must be >= 0)

    Returns:
        String of length ``width``

    Raises:
        InvalidArgumentError: If width is negative

    Example:
        >>> pad("Year", 6)
        'Year  '
        >>> pad("Microsecond", 5)
        'Micro'
    """
    if width < 0:
        raise InvalidArgumentError(f"Padding width must be >= 0, got {width}")

    if len(text) > width:
        return text[:width]
    return text.ljust(width, " ")


def blank(width: int) -> str:
    """Return ``width`` spaces."""
    return pad("", width)
