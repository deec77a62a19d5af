# seqkit/services/formatting.py
from __future__ import annotations

import numbers
from typing import Any, Iterable, List, Optional

from seqkit.errors import NullInputError
from seqkit.observability.metrics import instrumented
from seqkit.schemas import FormatSpec

__all__: list[str] = [
    "to_display_string",
    "is_primitive_like",
]

# numbers.Number covers int, float, bool, Decimal, Fraction and numpy scalars
PRIMITIVE_LIKE_TYPES = (numbers.Number, str)


def is_primitive_like(items: Iterable[Any]) -> bool:
    """True if every element is a number or text."""
    return all(isinstance(item, PRIMITIVE_LIKE_TYPES) for item in items)


def _element_suffix(spec: FormatSpec, evenly_spaced: bool, primitive_like: bool) -> str:
    # Text appended after every element except the last
    if spec.no_separator:
        return ""
    if primitive_like and evenly_spaced:
        if spec.width != 2:
            return f" {spec.separator} "
        return f"{spec.separator} "
    if primitive_like:
        return f"{spec.separator} "
    return spec.separator


@instrumented("to_display_string")
def to_display_string(
    seq: Iterable[Any],
    pattern: str = "",
    evenly_spaced_separator: bool = False,
    primitive_like: Optional[bool] = None,
) -> str:
    """
    Render a sequence as a string.

    ``pattern`` is "" (no brackets), one separator character, two bracket
    characters, three characters (left bracket, separator, right bracket) or
    "/0+" for no separator at all. Numbers and text get a space after each
    separator; ``evenly_spaced_separator`` puts one on both sides.
    ``primitive_like`` overrides the element type check.

    >>> to_display_string([2, 3, 4], "[,]")
    '[2, 3, 4]'
    >>> to_display_string([2, 3, 4], "(|)", True)
    '(2 | 3 | 4)'
    """
    if seq is None:
        raise NullInputError("seq")
    spec = FormatSpec.parse(pattern)
    items: List[Any] = list(seq)
    if primitive_like is None:
        primitive_like = is_primitive_like(items)

    suffix = _element_suffix(spec, evenly_spaced_separator, primitive_like)
    parts = [f"{item}{suffix}" for item in items[:-1]]
    if items:
        parts.append(str(items[-1]))
    return spec.outer_left + "".join(parts) + spec.outer_right
