"""Seeded pseudo-random stream shared by every synthesizer.

The stream is a 32-bit linear congruential generator whose initial state
is a rolling hash of the seed string.  Given the same seed it yields the
same sequence in every process, which is what makes a generated template
reproducible.  It is not suitable for anything security related.
"""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MODULUS = 2 ** 32
_MULTIPLIER = 1664525
_INCREMENT = 1013904223


def _char_codes(seed: str) -> list[int]:
    """UTF-16 code units of *seed* (what a browser's charCodeAt sees)."""
    raw = seed.encode("utf-16-le", "surrogatepass")
    return [raw[i] | (raw[i + 1] << 8) for i in range(0, len(raw), 2)]


def fold_seed(seed: str) -> int:
    state = 0
    for code in _char_codes(seed):
        state = ((state << 5) - state + code) & _MASK32
    return state


class SeededRandom:
    __slots__ = ("seed", "_state", "draws")

    def __init__(self, seed: str):
        self.seed = seed
        self._state = fold_seed(seed)
        self.draws = 0

    def next(self) -> float:
        """Advance the generator and return a float in [0, 1)."""
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _MASK32
        self.draws += 1
        return self._state / _MODULUS

    # ---- convenience draws built on next() ----

    def index(self, n: int) -> int:
        return int(self.next() * n)

    def choice(self, options):
        return options[self.index(len(options))]

    def chance(self, threshold: float) -> bool:
        """True when the next draw exceeds *threshold*."""
        return self.next() > threshold
