"""Error types raised by seqkit operations."""
from __future__ import annotations

from typing import Any, Dict, Optional

__all__: list[str] = [
    "SeqKitError",
    "NullInputError",
    "EmptySequenceError",
    "InvalidIndexError",
    "LengthMismatchError",
    "UnsupportedPatternError",
    "ImmutableSequenceError",
    "UnsupportedElementTypeError",
    "InsufficientDataSetError",
    "NoModeError",
]


class SeqKitError(Exception):
    """Base error class for seqkit."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class NullInputError(SeqKitError, TypeError):
    """A required sequence or pattern argument was None."""

    def __init__(self, argument: str):
        super().__init__(
            f"'{argument}' must not be None",
            details={"argument": argument},
        )


class EmptySequenceError(SeqKitError, ValueError):
    """An operation needing at least one element received none."""

    def __init__(self, operation: str):
        super().__init__(
            f"{operation} requires at least one element",
            details={"operation": operation},
        )


class InvalidIndexError(SeqKitError, IndexError):
    """An index or count argument is negative or out of bounds."""

    def __init__(self, message: str, **details: Any):
        super().__init__(message, details=details)


class LengthMismatchError(SeqKitError, ValueError):
    """Fill values do not match the requested insertion count."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"expected {expected} values to insert, got {actual}",
            details={"expected": expected, "actual": actual},
        )


class UnsupportedPatternError(SeqKitError, ValueError):
    """A formatting pattern has an unrecognized length."""

    def __init__(self, pattern: str):
        super().__init__(
            f"Unsupported formatting pattern {pattern!r} "
            "(expected 0-3 characters or '/0+')",
            details={"pattern": pattern, "length": len(pattern)},
        )


class ImmutableSequenceError(SeqKitError, TypeError):
    """An in-place operation received a sequence that cannot grow in place."""

    def __init__(self, argument: str, actual_type: type):
        super().__init__(
            f"'{argument}' must be a mutable sequence such as a list, "
            f"got {actual_type.__name__}",
            details={"argument": argument, "type": actual_type.__name__},
        )


class UnsupportedElementTypeError(SeqKitError, TypeError):
    """Elements are not one of the supported numeric kinds."""

    def __init__(self, message: str, **details: Any):
        super().__init__(message, details=details)


# Reserved for statistics beyond mean/median; nothing raises these yet.
class InsufficientDataSetError(SeqKitError, ValueError):
    """The data set is too small for the requested statistic."""


class NoModeError(SeqKitError, ValueError):
    """The data set has no unique mode."""
