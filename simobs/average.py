"""Running mean and variance of a stream of scalar observations."""

from __future__ import annotations

import threading


class AverageObservable:
    """Keeps the running average, mean square and last value of observations."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._mean = 0.0
        self._mean_sq = 0.0
        self._count = 0
        self._instant = 0.0

    def clear(self) -> None:
        """Forget every observation made so far."""
        with self._lock:
            self._mean = 0.0
            self._mean_sq = 0.0
            self._count = 0
            self._instant = 0.0

    def observe(self, value: float) -> None:
        """Add one observation to the running averages."""
        value = float(value)
        with self._lock:
            self._count += 1
            n = float(self._count)
            self._mean = value / n + (n - 1.0) / n * self._mean
            self._mean_sq = value * value / n + (n - 1.0) / n * self._mean_sq
            self._instant = value

    def average(self) -> float:
        """Mean of all observations."""
        return self._mean

    def instant(self) -> float:
        """The most recent observation."""
        return self._instant

    def variance(self) -> float:
        """Population variance of all observations."""
        return self._mean_sq - self._mean * self._mean

    def count(self) -> int:
        """Number of observations made."""
        return self._count