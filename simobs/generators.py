"""Seeded random number generators for common distributions."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod


class Generator(ABC):
    """Base class holding a seeded Mersenne Twister stream."""

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(seed)

    @abstractmethod
    def __call__(self) -> float:
        """Draw one number."""


class NormalGenerator(Generator):
    """Normally distributed numbers with a given mean and standard deviation."""

    def __init__(self, mean: float, std: float, seed: int) -> None:
        if not std > 0.0:
            raise ValueError("standard deviation must be positive")
        super().__init__(seed)
        self._mean = float(mean)
        self._std = float(std)

    def __call__(self) -> float:
        return self._rng.gauss(self._mean, self._std)


class UniformGenerator(Generator):
    """Uniformly distributed numbers in ``[low, high)``."""

    def __init__(self, low: float, high: float, seed: int) -> None:
        if low > high:
            raise ValueError("lower limit must not exceed the upper limit")
        super().__init__(seed)
        self._low = float(low)
        self._high = float(high)

    def __call__(self) -> float:
        return self._low + (self._high - self._low) * self._rng.random()


class ExponentialGenerator(Generator):
    """Exponentially distributed numbers.

    Called without an argument it draws with the rate given at construction;
    called with a rate it inverts a separate uniform stream seeded with
    ``seed + 100``.
    """

    def __init__(self, lam: float, seed: int) -> None:
        if not lam > 0.0:
            raise ValueError("rate must be positive")
        super().__init__(seed)
        self._lam = float(lam)
        self._uniform = UniformGenerator(0.0, 1.0, seed + 100)

    def __call__(self, lam: float | None = None) -> float:
        if lam is None:
            return self._rng.expovariate(self._lam)
        if not lam > 0.0:
            raise ValueError("rate must be positive")
        return -math.log(self._uniform()) / lam