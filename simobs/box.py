"""Observables of the simulation box: volume and pressure."""

from __future__ import annotations

import numpy as np

from .average import AverageObservable
from .base import SystemObservable


def calculate_pressure(s, v, k) -> float:
    """Scalar pressure from box matrix ``s``, virial ``v`` and kinetic ``k`` tensors."""
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)
    k = np.asarray(k, dtype=float)
    if s.shape[0] > 2:
        pressure = (
            -1.0 / (3.0 * s[1, 1] * s[2, 2]) * (k[0, 0] + v[0, 0])
            - 1.0 / (3.0 * s[0, 0] * s[2, 2]) * (k[1, 1] + v[1, 1])
            - 1.0 / (3.0 * s[0, 0] * s[1, 1]) * (k[2, 2] + v[2, 2])
        )
    else:
        pressure = (
            -1.0 / (2.0 * s[1, 1]) * (k[0, 0] + v[0, 0])
            - 1.0 / (2.0 * s[0, 0]) * (k[1, 1] + v[1, 1])
        )
    return float(pressure)


class SystemVolume(SystemObservable):
    """Volume of the simulation box, the determinant of its matrix.

    The box is held by reference, so changes made to it in place are seen.
    """

    def __init__(self, box, n: int, rec_freq: int, rec_thresh: int) -> None:
        self._volume = AverageObservable()
        super().__init__(rec_freq, rec_thresh)
        self.box = box
        self.n = int(n)

    def update(self) -> None:
        if self.rec_step():
            self._volume.observe(float(np.linalg.det(np.asarray(self.box, dtype=float))))

    def average(self) -> float:
        return self._volume.average()

    def instant(self) -> float:
        return self._volume.instant()

    def reset(self, rec_freq: int, rec_thresh: int) -> None:
        super().reset(rec_freq, rec_thresh)
        self._volume.clear()


class SystemPressure(SystemObservable):
    """Pressure computed from box, virial and kinetic matrices held by reference."""

    def __init__(self, s, v, k, rec_freq: int, rec_thresh: int) -> None:
        super().__init__(rec_freq, rec_thresh)
        self.s = s
        self.v = v
        self.k = k
        self._pressure = AverageObservable()

    def update(self) -> None:
        if self.rec_step():
            self._pressure.observe(calculate_pressure(self.s, self.v, self.k))

    def average(self) -> float:
        return self._pressure.average()

    def instant(self) -> float:
        return self._pressure.instant()