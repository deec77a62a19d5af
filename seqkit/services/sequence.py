"""Generic sequence helpers: concatenation, insertion and folding."""
from __future__ import annotations

import numbers
import operator
from typing import Any, Callable, Iterable, List, MutableSequence, Optional, Sequence, TypeVar

from seqkit.errors import (
    ImmutableSequenceError,
    InvalidIndexError,
    LengthMismatchError,
    NullInputError,
)
from seqkit.observability.metrics import instrumented

__all__: list[str] = [
    "concat_any",
    "insert_into",
    "is_null_or_empty",
    "add_all",
    "subtract_all",
]

T = TypeVar("T")


@instrumented("concat_any")
def concat_any(*sequences: Iterable[T]) -> List[T]:
    """
    Concatenate all sequences in the order given.
    Raises NullInputError if any of them is None.
    """
    for position, seq in enumerate(sequences):
        if seq is None:
            raise NullInputError(f"sequences[{position}]")
    combined: List[T] = []
    for seq in sequences:
        combined.extend(seq)
    return combined


def _default_for(sample: Any) -> Any:
    # Zero value of numbers/text (numpy scalars included), None otherwise
    if isinstance(sample, (numbers.Number, str, bytes)):
        return type(sample)()
    return None


def _as_index(value: Any, argument: str) -> int:
    try:
        return operator.index(value)
    except TypeError as exc:
        raise InvalidIndexError(
            f"{argument} must be an integer, got {type(value).__name__}",
            **{argument: value},
        ) from exc


@instrumented("insert_into")
def insert_into(
    src: MutableSequence[T],
    start_index: int,
    insert_count: int,
    values: Optional[Sequence[T]] = None,
) -> List[T]:
    """Insert ``insert_count`` elements into ``src`` before ``start_index``.

    Elements at and after ``start_index`` move right. The gap is filled with
    ``values`` when given, otherwise with the zero value of the element type
    (``0`` for ints, ``""`` for strings, ``None`` for other objects).

    ``src`` is modified in place, and only once every check has passed.
    Returns the inserted elements.

    Raises:
        NullInputError: ``src`` is None.
        ImmutableSequenceError: ``src`` is not a mutable sequence (a tuple,
            string or numpy array).
        InvalidIndexError: ``start_index`` is outside ``[0, len(src))``,
            ``insert_count`` is negative, or either is not an integer.
        LengthMismatchError: ``values`` is non-empty and its length differs
            from ``insert_count``.
    """
    if src is None:
        raise NullInputError("src")
    # numpy arrays accept slice assignment but never grow
    if not isinstance(src, MutableSequence):
        raise ImmutableSequenceError("src", type(src))
    start_index = _as_index(start_index, "start_index")
    insert_count = _as_index(insert_count, "insert_count")
    length = len(src)
    if start_index < 0 or start_index >= length:
        raise InvalidIndexError(
            f"start_index {start_index} out of range for length {length}",
            start_index=start_index, length=length,
        )
    if insert_count < 0:
        raise InvalidIndexError(
            f"insert_count must not be negative, got {insert_count}",
            insert_count=insert_count,
        )
    fill = list(values) if values is not None else []
    if fill and len(fill) != insert_count:
        raise LengthMismatchError(insert_count, len(fill))
    if not fill:
        fill = [_default_for(src[start_index])] * insert_count

    src[start_index:start_index] = fill
    return list(fill)


def is_null_or_empty(seq: Optional[Sequence[Any]]) -> bool:
    """Return True if ``seq`` is None or has no elements."""
    return seq is None or len(seq) == 0


def _selected(values: Iterable[Any], selector: Optional[Callable[[Any], Any]]) -> List[Any]:
    if values is None:
        raise NullInputError("values")
    if selector is None:
        return list(values)
    return [selector(v) for v in values]


@instrumented("add_all")
def add_all(values: Iterable[Any], selector: Optional[Callable[[Any], Any]] = None) -> Any:
    """Sum of all values, optionally mapped through ``selector`` first."""
    items = _selected(values, selector)
    if len(items) == 1:
        return items[0]
    total = 0
    for item in items:
        total = total + item
    return total


@instrumented("subtract_all")
def subtract_all(values: Iterable[Any], selector: Optional[Callable[[Any], Any]] = None) -> Any:
    """First value minus every following value; 0 for no values."""
    items = _selected(values, selector)
    if not items:
        return 0
    result = items[0]
    for item in items[1:]:
        result = result - item
    return result
