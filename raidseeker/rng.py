"""Xoroshiro128+ generator used to derive raid encounters from a seed."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1
_MAX_U32 = 0xFFFFFFFF
XOROSHIRO_CONSTANT = 0x82A2B175229D6A5B


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


def _bit_mask(value: int) -> int:
    """Smallest all-ones mask that covers ``value - 1``."""
    x = (value - 1) & _MAX_U32
    for shift in (1, 2, 4, 8, 16):
        x |= x >> shift
    return x


class XoroShiro:
    """Xoroshiro128+ with the second state word fixed to the game constant."""

    __slots__ = ("_state0", "_state1")

    def __init__(self, seed: int = 0) -> None:
        self._state0 = seed & _MASK64
        self._state1 = XOROSHIRO_CONSTANT

    def next(self) -> int:
        """Advance the generator and return the next 64-bit output."""
        s0 = self._state0
        s1 = self._state1
        result = (s0 + s1) & _MASK64

        s1 ^= s0
        self._state0 = _rotl(s0, 24) ^ s1 ^ ((s1 << 16) & _MASK64)
        self._state1 = _rotl(s1, 37)
        return result

    def next_int(self, maximum: int) -> int:
        """Return a value in ``range(maximum)`` using mask-and-reject sampling."""
        if not 1 <= maximum <= _MAX_U32:
            raise ValueError(f"maximum must be between 1 and {_MAX_U32}, got {maximum}")
        mask = _bit_mask(maximum)
        if maximum - 1 == mask:
            return self.next() & mask
        while True:
            result = self.next() & mask
            if result < maximum:
                return result