"""A small xoroshiro32++ pseudo-random number generator producing 16-bit values."""

from __future__ import annotations

from typing import Iterator, Sequence

_MASK = 0xFFFF


def _rotl16(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (16 - shift))) & _MASK


class Prng:
    """Endless iterator of 16-bit pseudo-random numbers."""

    def __init__(self, state: Sequence[int]) -> None:
        self.seed(state)

    def seed(self, seed: Sequence[int]) -> None:
        """Set the generator's two-word state directly."""
        first, second = seed
        for word in (first, second):
            if not 0 <= word <= _MASK:
                raise ValueError(f"seed words must be 16-bit, got {word}")
        self._state = [first, second]

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        s0, s1 = self._state
        result = (_rotl16((s0 + s1) & _MASK, 9) + s0) & _MASK
        s1 ^= s0
        s0 = _rotl16(s0, 13) ^ s1 ^ ((s1 << 5) & _MASK)
        s1 = _rotl16(s1, 10)
        self._state = [s0, s1]
        return result