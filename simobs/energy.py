"""Total and potential energy observables of a particle system.

The molecule handed to these observables is expected to provide
``particles`` (a mapping or iterable of particles, each with a momentum
``p`` and a mass ``m`` given as a scalar or a matrix) and a
``potential()`` method.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import numpy as np

from .average import AverageObservable
from .base import SystemObservable


def _particles(molecule) -> Iterable:
    particles = molecule.particles
    if isinstance(particles, Mapping):
        return particles.values()
    return particles


def _momentum_norm(particle) -> float:
    """``p . m^-1 p`` for one particle."""
    p = np.asarray(particle.p, dtype=float)
    m = np.asarray(particle.m, dtype=float)
    if m.ndim == 0:
        return float(p @ p / m)
    return float(p @ np.linalg.solve(m, p))


class SystemEnergy(SystemObservable):
    """Total energy, kinetic plus potential, of a molecule."""

    def __init__(self, molecule, rec_freq: int, rec_thresh: int) -> None:
        self._energy = AverageObservable()
        super().__init__(rec_freq, rec_thresh)
        self.molecule = molecule

    def update(self) -> None:
        if self.rec_step():
            self._energy.observe(self.kinetic() + self.molecule.potential())

    def update_potential(self) -> None:
        """Record only the potential energy on a recording step."""
        if self.rec_step():
            self._energy.observe(self.molecule.potential())

    def average(self) -> float:
        return self._energy.average()

    def instant(self) -> float:
        return self._energy.instant()

    def reset(self, rec_freq: int, rec_thresh: int) -> None:
        super().reset(rec_freq, rec_thresh)
        self._energy.clear()

    def kinetic(self) -> float:
        """Kinetic energy ``1/2 sum p . m^-1 p`` of all particles."""
        return 0.5 * sum(_momentum_norm(particle) for particle in _particles(self.molecule))


class SystemPotentialEnergy(SystemEnergy):
    """Potential energy of a molecule."""

    def update(self) -> None:
        if self.rec_step():
            self._energy.observe(self.molecule.potential())