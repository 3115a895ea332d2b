"""Kinetic, configurational and virial temperature observables.

The molecule handed to these observables is expected to provide
``particles`` (a mapping or iterable of particles with momentum ``p``,
mass ``m``, position ``q`` and force ``f``), an integer ``dim`` and, for
the configurational temperature, a ``laplace()`` method.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import numpy as np

from .average import AverageObservable
from .base import SystemObservable


def _particles(molecule) -> list:
    particles = molecule.particles
    if isinstance(particles, Mapping):
        return list(particles.values())
    return list(particles)


def _momentum_norm(particle) -> float:
    p = np.asarray(particle.p, dtype=float)
    m = np.asarray(particle.m, dtype=float)
    if m.ndim == 0:
        return float(p @ p / m)
    return float(p @ np.linalg.solve(m, p))


def _ratio(numerator: float, denominator: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


class SystemTemperature(SystemObservable):
    """Kinetic (momentum) temperature of a molecule."""

    def __init__(self, molecule, rec_freq: int, rec_thresh: int) -> None:
        self._temp = AverageObservable()
        super().__init__(rec_freq, rec_thresh)
        self.molecule = molecule

    def update(self) -> None:
        if self.rec_step():
            self.update_temperature()

    def update_temperature(self) -> None:
        """Observe the current temperature regardless of the step counters."""
        particles = _particles(self.molecule)
        per_particle = AverageObservable()
        for particle in particles:
            per_particle.observe(_momentum_norm(particle))

        dim = float(self.molecule.dim)
        n = float(len(particles))
        if n > 1.0:
            self._temp.observe(n * per_particle.average() / (dim * (n - 1.0)))
        else:
            self._temp.observe(per_particle.average() / dim)

    def average(self) -> float:
        return self._temp.average()

    def instant(self) -> float:
        return self._temp.instant()

    def reset(self, rec_freq: int, rec_thresh: int) -> None:
        super().reset(rec_freq, rec_thresh)
        self._temp.clear()


class SystemConfigurationalTemperature(SystemTemperature):
    """Configurational temperature ``<|grad V|^2> / <laplace V>``."""

    def __init__(self, molecule, rec_freq: int, rec_thresh: int) -> None:
        self._nabla_square = AverageObservable()
        self._laplace = AverageObservable()
        super().__init__(molecule, rec_freq, rec_thresh)

    def update_temperature(self) -> None:
        total = 0.0
        for particle in _particles(self.molecule):
            f = np.asarray(particle.f, dtype=float)
            total += float(f @ f)
        self._nabla_square.observe(total)
        self._laplace.observe(self.molecule.laplace())

    def average(self) -> float:
        return _ratio(self._nabla_square.average(), self._laplace.average())

    def instant(self) -> float:
        return _ratio(self._nabla_square.instant(), self._laplace.instant())

    def reset(self, rec_freq: int, rec_thresh: int) -> None:
        super().reset(rec_freq, rec_thresh)
        self._nabla_square.clear()
        self._laplace.clear()


class SystemVirialTemperature(SystemTemperature):
    """Temperature estimated from the virial ``q . f`` of the particles."""

    def update_temperature(self) -> None:
        particles: Iterable = _particles(self.molecule)
        dim = float(self.molecule.dim)
        n = float(len(particles))
        t = 0.0
        for particle in particles:
            q = np.asarray(particle.q, dtype=float)
            f = np.asarray(particle.f, dtype=float)
            t = -1.0 / (n * dim) * float(q @ f) + (n - 1.0) / n * t
        self._temp.observe(t)