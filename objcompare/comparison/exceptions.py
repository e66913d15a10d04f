"""
Custom exception hierarchy for object comparison.

This module defines the errors raised by the flattener, the aligned table
and the merge aligner when a caller violates their contracts.
"""


class ObjectCompareError(Exception):
    """
    Base exception for all comparison-related errors.

    Every error in this hierarchy is a programming/contract violation. None of
    them are transient, so retrying the same call never helps.
    """

    pass


class InvalidArgumentError(ObjectCompareError, ValueError):
    """
    Raised when an argument is outside the accepted domain.

    Examples: a None instance passed to the flattener, a negative padding
    width, or a None value placed into a PropertyMap.
    """

    pass


class IndexOutOfRangeError(ObjectCompareError, IndexError):
    """
    Raised when positional key access falls outside [0, length).
    """

    pass
