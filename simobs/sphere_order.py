"""Local bond-orientational order from spherical harmonics.

The molecule handed to this observable is expected to provide
``particles``, a mapping or iterable of particle objects.
"""

from __future__ import annotations

import cmath
import math
from collections.abc import Mapping
from pathlib import Path

import numpy as np
from scipy.special import lpmv

from .average import AverageObservable
from .base import SystemObservable


def _particles(molecule) -> list:
    particles = molecule.particles
    if isinstance(particles, Mapping):
        return list(particles.values())
    return list(particles)


def spherical_angles(dr) -> tuple[float, float]:
    """Polar angle ``theta`` and azimuth ``phi`` of the direction of ``dr``.

    For a two-dimensional vector the polar angle is zero.
    """
    vec = np.asarray(dr, dtype=float)
    norm = float(np.linalg.norm(vec))
    if norm == 0.0:
        raise ValueError("cannot find the direction of a zero vector")
    unit = vec / norm
    theta = math.acos(min(1.0, max(-1.0, float(unit[2])))) if unit.size > 2 else 0.0
    phi = math.atan2(float(unit[1]), float(unit[0]))
    return theta, phi


def _spherical_harmonic(l: int, m: int, theta: float, phi: float) -> complex:
    norm = math.sqrt(
        (2 * l + 1) / (4.0 * math.pi) * (math.factorial(l - m) / math.factorial(l + m))
    )
    return norm * float(lpmv(m, l, math.cos(theta))) * cmath.exp(1j * m * phi)


class SphereOrderObservable(SystemObservable):
    """Order parameter ``q_l`` built from the spherical harmonics of neighbour bonds.

    Call :meth:`clear` once per step, which also advances the step
    counters, then :meth:`update` for every neighbouring pair.
    """

    def __init__(
        self, molecule, lmax: int, cutoff: float, rec_freq: int, rec_thresh: int
    ) -> None:
        lmax = int(lmax)
        if lmax < 0:
            raise ValueError("degree of the spherical harmonics must not be negative")
        super().__init__(rec_freq, rec_thresh)
        self.molecule = molecule
        self.lmax = lmax
        self.cutoff = float(cutoff)
        self._rows = 2 * lmax + 1
        self._real = {
            id(p): [AverageObservable() for _ in range(self._rows)]
            for p in _particles(molecule)
        }
        self._imag = {
            id(p): [AverageObservable() for _ in range(self._rows)]
            for p in _particles(molecule)
        }
        self._state = AverageObservable()
        self._local_rec_step = False

    def clear(self) -> None:
        """Forget the per-particle observations and advance the step counters."""
        for particle in _particles(self.molecule):
            for ave in self._real[id(particle)]:
                ave.clear()
            for ave in self._imag[id(particle)]:
                ave.clear()
        self._local_rec_step = self.rec_step()

    def update(self, current, neighbour, r: float, dr) -> None:
        """Record the bond ``dr`` and its reverse within the cutoff.

        Both directions are accumulated on ``current``.
        """
        if r < self.cutoff and self._local_rec_step:
            vec = np.asarray(dr, dtype=float)
            self._add(current, spherical_angles(vec))
            self._add(current, spherical_angles(-vec))

    def _add(self, particle, angles) -> None:
        values = self.order_parameter(angles)
        for ave, value in zip(self._real[id(particle)], values[:, 0]):
            ave.observe(value)
        for ave, value in zip(self._imag[id(particle)], values[:, 1]):
            ave.observe(value)

    def order_parameter(self, angles) -> np.ndarray:
        """Real and imaginary parts of ``Y_l^m`` for ``m = 0, 1, -1, 2, -2, ...``.

        Returns an array of shape ``(2 l + 1, 2)``.
        """
        theta, phi = angles
        result = np.zeros((self._rows, 2))
        row = 0
        for m in range(self.lmax + 1):
            sph = _spherical_harmonic(self.lmax, m, float(theta), float(phi))
            result[row] = (sph.real, sph.imag)
            if m > 0:
                row += 1
                result[row] = ((-1.0) ** m * sph.real, (-1.0) ** (m + 1) * sph.imag)
            row += 1
        return result

    def particle_order(self, particle) -> float:
        """Order parameter of one particle from its averaged harmonics."""
        real = sum(ave.average() for ave in self._real[id(particle)])
        imag = sum(ave.average() for ave in self._imag[id(particle)])
        return math.sqrt(
            4.0 * math.pi / (2.0 * self.lmax + 1.0) * (real * real + imag * imag)
        )

    def write(
        self,
        file_name: str,
        time: float,
        index: int | None = None,
        directory: str | Path = "Observables",
    ) -> Path:
        """Observe the mean particle order and append ``time, instant, average``."""
        if index is None:
            raise TypeError("sphere order observable must be written with an index")
        current_state = AverageObservable()
        for particle in _particles(self.molecule):
            current_state.observe(self.particle_order(particle))
        self._state.observe(current_state.average())

        path = Path(directory) / f"{file_name}_{index}.csv"
        with path.open("a") as fh:
            fh.write(
                f"{time:1.7e}, {self._state.instant():1.7e}, {self._state.average():1.7e}\n"
            )
        return path

    def write_frame(
        self, file_name: str, index: int, directory: str | Path = "Observables"
    ) -> Path:
        """Write the order of every particle to ``Frames/<name>_<index>.csv``."""
        path = Path(directory) / "Frames" / f"{file_name}_{index}.csv"
        with path.open("w") as fh:
            for particle in _particles(self.molecule):
                fh.write(f"{self.particle_order(particle):.4f}\n")
        return path

    def average(self) -> float:
        return self._state.average()

    def instant(self) -> float:
        return self._state.instant()