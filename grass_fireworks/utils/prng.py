# grass_fireworks/utils/prng.py
"""
Seeded pseudo-random streams.

mulberry32 over 32-bit unsigned state, bit-exact with the JavaScript
reference (``Math.imul`` and ``>>>`` semantics), so the same seed draws the
same star field and burst jitter on every platform.
"""
from __future__ import annotations

from typing import Callable

MASK32 = 0xFFFFFFFF
_GOLDEN = 0x6D2B79F5

Draw = Callable[[], float]


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK32


def _to_int32(value: int) -> int:
    value &= MASK32
    return value - 0x100000000 if value & 0x80000000 else value


def create_seeded_random(seed: int) -> Draw:
    """Return a draw function yielding floats in [0, 1) from ``seed``.

    Each call advances a private 32-bit state; two streams built from the
    same seed produce identical sequences.
    """
    state = int(seed) & MASK32

    def draw() -> float:
        nonlocal state
        state = (state + _GOLDEN) & MASK32
        t = state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK32
        return ((t ^ (t >> 14)) & MASK32) / 4294967296

    return draw


def string_to_seed(text: str) -> int:
    """Hash ``text`` to a non-negative integer seed (Java-style 31x hash).

    Iterates UTF-16 code units with signed 32-bit wrap-around, then takes
    the absolute value. The empty string hashes to 0.
    """
    h = 0
    raw = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(raw), 2):
        unit = raw[i] | (raw[i + 1] << 8)
        h = _to_int32((h << 5) - h + unit)
    return abs(h)


def create_seeded_random_from_string(text: str) -> Draw:
    return create_seeded_random(string_to_seed(text))
