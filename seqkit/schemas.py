from __future__ import annotations

from enum import Enum

import numpy as np
from pydantic import BaseModel, Field, model_validator

from seqkit.errors import NullInputError, UnsupportedPatternError

# Pattern meaning "no separator at all"
NO_SEPARATOR_PATTERN = "/0+"


class NumericKind(str, Enum):
    """Numeric element widths accepted by the statistics helpers."""

    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    CHAR = "char"  # code point of a one-character string

    @property
    def dtype(self) -> np.dtype:
        # Code points are stored unsigned; char is widened like any integer.
        if self is NumericKind.CHAR:
            return np.dtype(np.uint32)
        return np.dtype(self.value)

    @classmethod
    def from_dtype(cls, dtype: np.dtype) -> "NumericKind | None":
        """Return the kind matching a numpy dtype, or None if unsupported."""
        try:
            return cls(np.dtype(dtype).name)
        except ValueError:
            return None


# Parsed formatting pattern, built once per formatting call
class FormatSpec(BaseModel):
    outer_left: str = Field(default="", max_length=1)   # Left bracket
    outer_right: str = Field(default="", max_length=1)  # Right bracket
    separator: str = Field(default="", max_length=1)    # Separator between elements
    no_separator: bool = False  # True for the "/0+" pattern
    width: int = Field(default=0, ge=0, le=3)  # Effective pattern length

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def check_width_matches_fields(self) -> "FormatSpec":
        # Brackets only exist for widths 2 and 3
        if self.width < 2 and (self.outer_left or self.outer_right):
            raise ValueError("brackets require a pattern of width 2 or 3")
        if self.no_separator and self.width != 1:
            raise ValueError("no_separator is only valid for width 1")
        return self

    @classmethod
    def parse(cls, pattern: str) -> "FormatSpec":
        """
        Parse a formatting pattern.
        Raises UnsupportedPatternError for lengths other than 0-3.
        """
        if pattern is None:
            raise NullInputError("pattern")
        if pattern == NO_SEPARATOR_PATTERN:
            return cls(separator=pattern[0], no_separator=True, width=1)
        width = len(pattern)
        if width == 0:
            return cls()
        if width == 1:
            return cls(separator=pattern, width=1)
        if width == 2:
            return cls(outer_left=pattern[0], outer_right=pattern[1], width=2)
        if width == 3:
            return cls(
                outer_left=pattern[0],
                separator=pattern[1],
                outer_right=pattern[2],
                width=3,
            )
        raise UnsupportedPatternError(pattern)
