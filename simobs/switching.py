"""Observables weighted by infinite-switch interpolation weights.

The method handed to these observables is expected to provide
``interpolation_points()`` and ``observable_weights()``. For a single
switch the points are an integer count and the weights a sequence of that
length. For a double switch the points are a pair ``(n_one, n_two)`` and
the weights a matrix of that shape.

Every interpolation point gets its own observable from ``factory()``. The
observable must provide ``update(weight)`` and
``write(file_name, index, directory=...)``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import numpy as np

from .base import SystemObservable


class IsWeightObservable(SystemObservable):
    """One weighted observable per interpolation point of a single switch."""

    def __init__(
        self, method, factory: Callable, rec_freq: int, rec_thresh: int
    ) -> None:
        super().__init__(rec_freq, rec_thresh)
        self.method = method
        self._n = int(method.interpolation_points())
        if self._n < 0:
            raise ValueError("number of interpolation points must not be negative")
        self.observables = [factory() for _ in range(self._n)]

    def update(self) -> None:
        """Update each point's observable with its current weight."""
        weights = list(self.method.observable_weights())
        if len(weights) < self._n:
            raise ValueError(
                f"expected {self._n} observable weights, got {len(weights)}"
            )
        for obs, weight in zip(self.observables, weights):
            obs.update(weight)

    def write(self, file_name: str, directory: str | Path = "Observables") -> list:
        """Write each point's observable, indexed by its point number."""
        return [
            obs.write(file_name, i, directory=directory)
            for i, obs in enumerate(self.observables)
        ]

    def average(self) -> float:
        raise TypeError("infinite switch weight observable has no single average")

    def instant(self) -> float:
        raise TypeError("infinite switch weight observable has no single instant value")


class DisWeightObservable(SystemObservable):
    """One weighted observable per point of a two-dimensional switch grid."""

    def __init__(
        self, method, factory: Callable, rec_freq: int, rec_thresh: int
    ) -> None:
        super().__init__(rec_freq, rec_thresh)
        self.method = method
        points = list(method.interpolation_points())
        if len(points) < 2:
            raise ValueError("a double switch needs two numbers of interpolation points")
        self._n_one = int(points[0])
        self._n_two = int(points[1])
        if self._n_one < 0 or self._n_two < 0:
            raise ValueError("number of interpolation points must not be negative")
        self.observables = [
            [factory() for _ in range(self._n_two)] for _ in range(self._n_one)
        ]

    def update(self) -> None:
        """Update each grid point's observable with its current weight."""
        weights = np.asarray(self.method.observable_weights(), dtype=float)
        if (
            weights.ndim != 2
            or weights.shape[0] < self._n_one
            or weights.shape[1] < self._n_two
        ):
            raise ValueError(
                f"expected a {self._n_one}x{self._n_two} matrix of observable weights, "
                f"got shape {weights.shape}"
            )
        for i, row in enumerate(self.observables):
            for j, obs in enumerate(row):
                obs.update(float(weights[i, j]))

    def write(self, file_name: str, directory: str | Path = "Observables") -> list:
        """Write observable ``(i, j)`` under the name ``<name>_<i>`` with index ``j``."""
        return [
            obs.write(f"{file_name}_{i}", j, directory=directory)
            for i, row in enumerate(self.observables)
            for j, obs in enumerate(row)
        ]

    def average(self) -> float:
        raise TypeError("double switch weight observable has no single average")

    def instant(self) -> float:
        raise TypeError("double switch weight observable has no single instant value")