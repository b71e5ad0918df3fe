"""Injectable random sources.

Every stochastic decision in the engine (initiative, hit, crit, magic, damage
variance, focus surge, XP variance, loot rolls) draws from a single callable
returning a float in [0, 1). Production passes ``random.random`` or a seeded
``mulberry32`` generator; tests pass a ``ScriptedRandom`` so outcomes are
pinned draw by draw.
"""

import random
from typing import Callable, Iterable

RandomSource = Callable[[], float]

_UINT32_MASK = 0xFFFFFFFF


def default_random() -> RandomSource:
    """The unseeded source used when callers do not inject one."""
    return random.random


def _imul(a: int, b: int) -> int:
    """32-bit integer multiplication (wraps like a C uint32)."""
    return (a * b) & _UINT32_MASK


def mulberry32(seed: int) -> RandomSource:
    """Seeded 32-bit generator used for bots and reproducible fights.

    Args:
        seed: Any integer; only the low 32 bits are used

    Returns:
        A callable returning floats in [0, 1)
    """
    state = seed & _UINT32_MASK

    def next_float() -> float:
        nonlocal state
        state = (state + 0x6D2B79F5) & _UINT32_MASK
        t = state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _UINT32_MASK
        return ((t ^ (t >> 14)) & _UINT32_MASK) / 4294967296

    return next_float


def seed_from_text(text: str) -> int:
    """Derive a seed from text by summing its code points."""
    return sum(ord(char) for char in text)


def roll_percent(rng: RandomSource, chance: float) -> bool:
    """Return True with probability ``chance`` percent (one draw)."""
    return rng() * 100 < chance


class ScriptedRandom:
    """Deterministic source replaying a fixed sequence of draws.

    Args:
        values: Floats in [0, 1) returned in order
        cycle: Restart from the beginning when the script runs out

    Raises:
        ValueError: If the script is empty or contains a value outside [0, 1)
        IndexError: When an uncycled script is exhausted
    """

    def __init__(self, values: Iterable[float], cycle: bool = False):
        self.values = list(values)
        if not self.values:
            raise ValueError("ScriptedRandom needs at least one value")
        for value in self.values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Scripted value out of range [0, 1): {value}")
        self.cycle = cycle
        self.calls = 0

    def __call__(self) -> float:
        index = self.calls
        if index >= len(self.values):
            if not self.cycle:
                raise IndexError(f"ScriptedRandom exhausted after {len(self.values)} draws")
            index %= len(self.values)
        self.calls += 1
        return self.values[index]

    @property
    def remaining(self) -> int:
        """Draws left before exhaustion (meaningless when cycling)."""
        return max(0, len(self.values) - self.calls)
