"""Pseudo-random number generators producing doubles in [0, 1)."""

from __future__ import annotations

from typing import Protocol

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_MANTISSA_SCALE = 2.0 ** -52


class RandomSource(Protocol):
    """Anything that yields floats in [0, 1) from ``random()``."""

    def random(self) -> float: ...


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


class Xoshiro256Plus:
    """xoshiro256+ generator with a multiplicative seeding scheme."""

    _SEED_MULTIPLIERS = (
        0xAB7F0912A3B1C813,
        0x9E3779B97F4A7C15,
        0xBF58476D1CE4E5B9,
        0x94D049BB133111EB,
    )

    def __init__(self, seed: int = 0) -> None:
        self._state: tuple[int, int, int, int] = (0, 0, 0, 0)
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the state from a 64-bit seed."""
        seed &= _MASK64
        s0, s1, s2, s3 = ((seed * m) & _MASK64 for m in self._SEED_MULTIPLIERS)
        self._state = (s0, s1, s2, s3)

    def random(self) -> float:
        """Return the next value in [0, 1)."""
        s0, s1, s2, s3 = self._state
        result = (s0 + s3) & _MASK64
        t = (s1 << 17) & _MASK64

        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = _rotl(s3, 45)
        self._state = (s0, s1, s2, s3)

        return ((result >> 12) | 1) * _MANTISSA_SCALE


class FastPcg:
    """Fast multiplicative PCG variant with a 32-bit output."""

    _DEFAULT_STATE = 0xCAFE00DD15EA5E5
    _MULTIPLIER = 6364136223846793005

    def __init__(self, seed: int | None = None) -> None:
        self._state = self._DEFAULT_STATE
        if seed is not None:
            self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the state; the state is always made odd."""
        self._state = (2 * seed + 1) & _MASK64

    def random(self) -> float:
        """Return the next value in [0, 1)."""
        x = self._state
        count = x >> 61
        self._state = (x * self._MULTIPLIER) & _MASK64
        x ^= x >> 22
        value = (x >> (22 + count)) & _MASK32
        mantissa = ((value << 1) | 1) << 19
        return mantissa * _MANTISSA_SCALE


_default = Xoshiro256Plus(0)


def default_generator() -> Xoshiro256Plus:
    """Return the shared generator used when none is supplied."""
    return _default


def set_seed(seed: int) -> None:
    """Reseed the shared generator."""
    _default.seed(seed)


def rng_01() -> float:
    """Draw a value in [0, 1) from the shared generator."""
    return _default.random()