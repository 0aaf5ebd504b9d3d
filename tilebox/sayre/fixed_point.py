"""Fixed-point number types: signed and unsigned 8.8 and 16.16."""

from __future__ import annotations

import math
from dataclasses import dataclass

_FRACTION_SCALE = 256


def _check_range(raw: int, low: int, high: int, name: str) -> None:
    if not low <= raw <= high:
        raise OverflowError(f"{name} raw value {raw} outside {low}..={high}")


def _as_i16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value >= 0x8000 else value


@dataclass(frozen=True)
class I16p16:
    """Signed 16.16 fixed-point value."""

    raw: int

    def __post_init__(self) -> None:
        _check_range(self.raw, -(2**31), 2**31 - 1, "I16p16")


@dataclass(frozen=True)
class U16p16:
    """Unsigned 16.16 fixed-point value."""

    raw: int

    def __post_init__(self) -> None:
        _check_range(self.raw, 0, 2**32 - 1, "U16p16")

    @classmethod
    def from_raw(cls, raw: int) -> U16p16:
        return cls(raw)


@dataclass(frozen=True)
class I8p8:
    """Signed 8.8 fixed-point value."""

    raw: int

    def __post_init__(self) -> None:
        _check_range(self.raw, -(2**15), 2**15 - 1, "I8p8")

    @classmethod
    def from_raw(cls, raw: int) -> I8p8:
        return cls(raw)

    @classmethod
    def from_float(cls, value: float) -> I8p8:
        """Convert, truncating toward zero and saturating at the type's limits."""
        if math.isnan(value):
            return cls(0)
        scaled = value * _FRACTION_SCALE
        if scaled >= 2**15 - 1:
            return cls(2**15 - 1)
        if scaled <= -(2**15):
            return cls(-(2**15))
        return cls(int(scaled))

    def to_float(self) -> float:
        return self.raw / _FRACTION_SCALE

    @classmethod
    def from_i16p16_truncated(cls, value: I16p16) -> I8p8:
        return cls(_as_i16(value.raw >> 8))

    def full_mul(self, other: I8p8) -> I16p16:
        return I16p16(self.raw * other.raw)

    def __neg__(self) -> I8p8:
        return I8p8(-self.raw)

    def __add__(self, other: I8p8) -> I8p8:
        if not isinstance(other, I8p8):
            return NotImplemented
        return I8p8(self.raw + other.raw)

    def __sub__(self, other: I8p8) -> I8p8:
        if not isinstance(other, I8p8):
            return NotImplemented
        return I8p8(self.raw - other.raw)

    def __mul__(self, other: I8p8) -> I8p8:
        if not isinstance(other, I8p8):
            return NotImplemented
        return I8p8.from_i16p16_truncated(self.full_mul(other))


@dataclass(frozen=True)
class U8p8:
    """Unsigned 8.8 fixed-point value."""

    raw: int

    def __post_init__(self) -> None:
        _check_range(self.raw, 0, 2**16 - 1, "U8p8")

    @classmethod
    def from_raw(cls, raw: int) -> U8p8:
        return cls(raw)

    @classmethod
    def from_u16p16_truncated(cls, value: U16p16) -> U8p8:
        return cls((value.raw >> 8) & 0xFFFF)

    def full_mul(self, other: U8p8) -> U16p16:
        return U16p16(self.raw * other.raw)