# =============================================================================
# BINCMP -- BINARY FILE COMPARISON
# File:   bincmp/core/domain.py
# =============================================================================
#
# SCOPE
# -----
# Enumerations, constants and frozen value types shared by the classifier,
# the comparator and the formatter.
#
# Implements: ComparisonMode, OutputFormat, LengthRelation, Difference,
# ComparisonReport, BUFFER_SIZE.
#
# No comparison logic. No rendering. No I/O.
#
# INVARIANTS ENFORCED
# -------------------
# Difference
#   INV-DF-01  offset is a non-negative int.
#   INV-DF-02  value1 and value2 are ints in [0, 255].
#
# ComparisonReport
#   INV-CR-01  bytes_compared >= 0.
#   INV-CR-02  0 <= difference_count <= bytes_compared.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .exceptions import BincmpConfigurationError


# Bytes requested from each input per iteration.
BUFFER_SIZE: int = 1024


# =============================================================================
# SECTION 1 -- ENUMERATIONS
# =============================================================================

class ComparisonMode(str, Enum):
    """
    Which byte pairs count as a difference. Fixed for the whole run.

    EXACT           -- every unequal pair.
    SINGLE_BITFLIP  -- only pairs that differ in exactly one bit.
    """
    EXACT          = "exact"
    SINGLE_BITFLIP = "single-bitflip"

    @classmethod
    def from_flag(cls, single_bitflip_only: bool) -> "ComparisonMode":
        return cls.SINGLE_BITFLIP if single_bitflip_only else cls.EXACT


class OutputFormat(str, Enum):
    """
    How offsets and byte values are rendered. Fixed for the whole run.

    HEX       -- offset, v1, v2 in lowercase hex, no prefix.
    DECIMAL   -- offset, v1, v2 in base 10.
    BINARY    -- offset in hex, v1 and v2 as 8-digit binary.
    COMBINED  -- decimal and hex of each, six columns.
    """
    HEX      = "hex"
    DECIMAL  = "decimal"
    BINARY   = "binary"
    COMBINED = "combined"

    @classmethod
    def parse(cls, name: str) -> "OutputFormat":
        """Case-insensitive lookup; raises BincmpConfigurationError."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name.lower())
        except (AttributeError, ValueError):
            raise BincmpConfigurationError(
                setting="format",
                value=name,
                constraint="must be one of " + ", ".join(f.value for f in cls),
            )


class LengthRelation(str, Enum):
    """
    Outcome of the end-of-file check once either input is exhausted.

    EQUAL          -- both inputs ended in the same iteration at the same length.
    FIRST_LARGER   -- the first input still had bytes when the second ended.
    SECOND_LARGER  -- the second input still had bytes when the first ended.
    """
    EQUAL         = "EQUAL"
    FIRST_LARGER  = "FIRST_LARGER"
    SECOND_LARGER = "SECOND_LARGER"

    @classmethod
    def from_counts(cls, n1: int, n2: int) -> "LengthRelation":
        if n1 < n2:
            return cls.SECOND_LARGER
        if n1 > n2:
            return cls.FIRST_LARGER
        return cls.EQUAL


# =============================================================================
# SECTION 2 -- VALUE TYPES
# =============================================================================

def _check_byte(field_name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not (0 <= value <= 255):
        raise ValueError(
            f"Difference: field '{field_name}' must be an int in [0, 255], got {value!r}"
        )


@dataclass(frozen=True)
class Difference:
    """
    One differing byte pair.

    Fields:
      offset  -- zero-based absolute position in both inputs.
      value1  -- byte from the first input.
      value2  -- byte from the second input.
    """
    offset: int
    value1: int
    value2: int

    def __post_init__(self) -> None:
        if not isinstance(self.offset, int) or isinstance(self.offset, bool) or self.offset < 0:
            raise ValueError(
                f"Difference: field 'offset' must be a non-negative int, got {self.offset!r}"
            )
        _check_byte("value1", self.value1)
        _check_byte("value2", self.value2)

    @property
    def xor(self) -> int:
        return self.value1 ^ self.value2


@dataclass(frozen=True)
class ComparisonReport:
    """
    Summary of one completed comparison run.

    Fields:
      bytes_compared    -- number of overlapping bytes examined
                           (the length of the shorter input).
      difference_count  -- number of Difference records delivered.
      length_relation   -- which input, if any, was longer.
      mode              -- ComparisonMode the run used.
    """
    bytes_compared:   int
    difference_count: int
    length_relation:  LengthRelation
    mode:             ComparisonMode

    def __post_init__(self) -> None:
        if self.bytes_compared < 0:
            raise ValueError("ComparisonReport: bytes_compared must be >= 0")
        if not (0 <= self.difference_count <= self.bytes_compared):
            raise ValueError(
                "ComparisonReport: difference_count must be in [0, bytes_compared]"
            )

    @property
    def identical(self) -> bool:
        """True iff no differences were found and both inputs had equal length."""
        return self.difference_count == 0 and self.length_relation is LengthRelation.EQUAL


__all__ = [
    "BUFFER_SIZE",
    "ComparisonMode",
    "OutputFormat",
    "LengthRelation",
    "Difference",
    "ComparisonReport",
]
