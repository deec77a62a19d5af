"""Numeric statistics helpers."""
from __future__ import annotations

import numbers
from typing import Optional, Sequence, Union

import numpy as np

from seqkit.errors import (
    EmptySequenceError,
    NullInputError,
    UnsupportedElementTypeError,
)
from seqkit.observability.metrics import instrumented
from seqkit.schemas import NumericKind

__all__: list[str] = [
    "mean",
    "median",
    "as_numeric_array",
]

NumericInput = Union[Sequence[int], Sequence[float], Sequence[str], str, np.ndarray]

# Largest Unicode code point
_MAX_CODE_POINT = 0x10FFFF


def _code_points(chars: Sequence[str]) -> np.ndarray:
    if any(len(c) != 1 for c in chars):
        raise UnsupportedElementTypeError(
            "character elements must be exactly one character long",
            kind=NumericKind.CHAR.value,
        )
    return np.fromiter((ord(c) for c in chars), dtype=NumericKind.CHAR.dtype, count=len(chars))


def _coerce(values: NumericInput) -> np.ndarray:
    if isinstance(values, str):
        return _code_points(values)
    if isinstance(values, np.ndarray):
        if values.dtype.kind == "U" and values.ndim == 1:
            return _code_points(values.tolist())
        return values
    items = list(values)
    if items and all(isinstance(v, str) for v in items):
        return _code_points(items)
    try:
        arr = np.asarray(items)
    except ValueError as exc:  # ragged nesting
        raise UnsupportedElementTypeError(str(exc)) from exc
    # Ints beyond 64 bits mixed with floats land in an object array
    if arr.dtype == object and all(_is_real(v) for v in items):
        try:
            return np.asarray(items, dtype=np.float64)
        except OverflowError as exc:
            raise UnsupportedElementTypeError(
                "values exceed the float64 range", dtype="float64",
            ) from exc
    return arr


def _is_real(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _cast(arr: np.ndarray, kind: NumericKind) -> np.ndarray:
    target = kind.dtype
    if arr.dtype == target:
        return arr
    source = arr.dtype.kind
    if target.kind == "f":
        if source not in "iuf":
            raise UnsupportedElementTypeError(
                f"cannot read {arr.dtype} values as {kind.value}",
                kind=kind.value, dtype=str(arr.dtype),
            )
        return arr.astype(target)
    # Integer targets (char included) only accept integers that fit
    if source not in "iu":
        raise UnsupportedElementTypeError(
            f"cannot read {arr.dtype} values as {kind.value}",
            kind=kind.value, dtype=str(arr.dtype),
        )
    if kind is NumericKind.CHAR:
        low, high = 0, _MAX_CODE_POINT
    else:
        info = np.iinfo(target)
        low, high = int(info.min), int(info.max)
    if int(arr.min()) < low or int(arr.max()) > high:
        raise UnsupportedElementTypeError(
            f"values do not fit in {kind.value}",
            kind=kind.value, low=low, high=high,
        )
    return arr.astype(target)


def as_numeric_array(
    values: NumericInput,
    operation: str,
    kind: Optional[Union[NumericKind, str]] = None,
) -> np.ndarray:
    """
    Validate ``values`` and return them as a one-dimensional numpy array of a
    supported numeric width.

    Raises NullInputError for None, EmptySequenceError for no elements and
    UnsupportedElementTypeError for anything outside NumericKind.
    """
    if values is None:
        raise NullInputError("values")
    arr = _coerce(values)
    if arr.ndim != 1:
        raise UnsupportedElementTypeError(
            "expected a one-dimensional sequence", ndim=arr.ndim,
        )
    if arr.size == 0:
        raise EmptySequenceError(operation)
    if kind is not None:
        try:
            kind = NumericKind(kind)
        except ValueError as exc:
            raise UnsupportedElementTypeError(f"unknown numeric kind {kind!r}", kind=str(kind)) from exc
        arr = _cast(arr, kind)
    if NumericKind.from_dtype(arr.dtype) is None:
        raise UnsupportedElementTypeError(
            f"unsupported element type {arr.dtype}", dtype=str(arr.dtype),
        )
    return arr


@instrumented("mean")
def mean(values: NumericInput, kind: Optional[Union[NumericKind, str]] = None) -> float:
    """
    Arithmetic mean of the elements, accumulated in double precision.
    Raises EmptySequenceError if input is empty.
    """
    arr = as_numeric_array(values, "mean", kind)
    total = np.sum(arr, dtype=np.float64)
    return float(total / arr.size)


@instrumented("median")
def median(values: NumericInput, kind: Optional[Union[NumericKind, str]] = None) -> float:
    """
    Middle value of the sorted elements, or the mean of the two middle values
    for an even count. The caller's sequence is never reordered.
    Raises EmptySequenceError if input is empty.
    """
    arr = as_numeric_array(values, "median", kind)
    if arr.size == 1:
        return float(arr[0])
    ordered = np.sort(arr)  # np.sort returns a copy
    mid = ordered.size // 2
    if ordered.size % 2 == 0:
        # Widen before adding so 64-bit integers cannot overflow
        return (float(ordered[mid - 1]) + float(ordered[mid])) / 2.0
    return float(ordered[mid])
