from __future__ import annotations

_MASK = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


class Mulberry32:
    """Seeded 32-bit mulberry32 generator.

    All arithmetic is kept modulo 2**32, which reproduces the reference
    bit-mixing sequence exactly for a given seed.
    """

    def __init__(self, seed: int) -> None:
        self.state = seed & _MASK

    def random(self) -> float:
        self.state = (self.state + 0x6D2B79F5) & _MASK
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / 4294967296.0

    def uniform(self, a: float, b: float) -> float:
        return self.random() * (b - a) + a
