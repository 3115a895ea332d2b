"""Bond-orientational order parameter from plane waves of a crystal lattice.

The molecule handed to this observable is expected to provide
``particles``, a mapping or iterable of particle objects. Pair
separations are reported through :meth:`OrderObservable.update`.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from pathlib import Path

import numpy as np

from .average import AverageObservable
from .base import SystemObservable

# Wave vectors in units of pi / (particle_radius / 2).
_WAVE_DIRECTIONS = np.array(
    [
        [-1.0, 1.0, 0.0],
        [-1.0, 0.0, 1.0],
        [0.0, 1.0, 1.0],
        [-1.5, 1.5, 0.5],
        [-1.5, 0.5, 1.5],
        [-0.5, 1.5, 1.5],
    ]
)


def _particles(molecule) -> list:
    particles = molecule.particles
    if isinstance(particles, Mapping):
        return list(particles.values())
    return list(particles)


class OrderObservable(SystemObservable):
    """Per-particle order ``|<exp(i k . dr)>|^2`` averaged over neighbours.

    Call :meth:`clear` once per step, which also advances the step
    counters, then :meth:`update` for every neighbouring pair.
    """

    def __init__(
        self, molecule, particle_radius: float, rec_freq: int, rec_thresh: int
    ) -> None:
        super().__init__(rec_freq, rec_thresh)
        self.molecule = molecule
        radius = float(particle_radius)
        self.cutoff = (1.0 + math.sqrt(2.0)) * radius
        self._pr = 0.5 * radius
        self._k = _WAVE_DIRECTIONS * (math.pi / self._pr)
        self._real = {id(p): AverageObservable() for p in _particles(molecule)}
        self._imag = {id(p): AverageObservable() for p in _particles(molecule)}
        self._state = AverageObservable()
        self._local_rec_step = False

    def clear(self) -> None:
        """Forget the per-particle observations and advance the step counters."""
        for particle in _particles(self.molecule):
            self._real[id(particle)].clear()
            self._imag[id(particle)].clear()
        self._local_rec_step = self.rec_step()

    def update(self, current, neighbour, r: float, dr) -> None:
        """Record the pair ``current``-``neighbour`` at separation ``dr`` within the cutoff."""
        if r < self.cutoff and self._local_rec_step:
            real, imag = self.order_parameter(dr)
            self._real[id(current)].observe(real)
            self._imag[id(current)].observe(imag)
            self._real[id(neighbour)].observe(real)
            self._imag[id(neighbour)].observe(-imag)

    def order_parameter(self, dr) -> tuple[float, float]:
        """Real and imaginary part of the mean of ``exp(i k . dr)`` over the wave vectors."""
        theta = self._k @ np.asarray(dr, dtype=float)
        return float(np.sum(np.cos(theta)) / 6.0), float(np.sum(np.sin(theta)) / 6.0)

    def write(
        self,
        file_name: str,
        time: float,
        index: int | None = None,
        directory: str | Path = "Observables",
    ) -> Path:
        """Write the per-particle order to ``States/`` and append the state average.

        The per-particle values are appended to ``States/<name>_<index>.csv``;
        ``time, instant, average`` of the system order is appended to
        ``<name>_0.csv``, whose path is returned.
        """
        if index is None:
            raise TypeError("order observable must be written with an index")
        directory = Path(directory)
        current_state = AverageObservable()
        with (directory / "States" / f"{file_name}_{index}.csv").open("a") as fh:
            for particle in _particles(self.molecule):
                real = self._real[id(particle)].average()
                imag = self._imag[id(particle)].average()
                value = real * real + imag * imag
                current_state.observe(value)
                fh.write(f"{value:1.7e}\n")

        self._state.observe(current_state.average())

        path = directory / f"{file_name}_0.csv"
        with path.open("a") as fh:
            fh.write(
                f"{time:1.7e}, {self._state.instant():1.7e}, {self._state.average():1.7e}\n"
            )
        return path

    def average(self) -> float:
        return self._state.average()

    def instant(self) -> float:
        return self._state.instant()