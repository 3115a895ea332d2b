"""Writing particle positions and the simulation box, and position histograms.

The molecule handed to these classes is expected to provide ``particles``
(a mapping or iterable of particles with a position ``q``) and an integer
``dim``. A particle that is a rigid body reports so through ``rigid_body``,
either a boolean or a method returning one, and carries a 2x2 orientation
matrix ``Q``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

import numpy as np

from .histogram import Histogram


def _particles(molecule) -> list:
    particles = molecule.particles
    if isinstance(particles, Mapping):
        return list(particles.values())
    return list(particles)


def _is_rigid(particle) -> bool:
    flag = getattr(particle, "rigid_body", False)
    return bool(flag() if callable(flag) else flag)


def _orientation(particle) -> str:
    q = np.asarray(particle.Q, dtype=float)
    return f", {q[0, 0]:.10f}, {q[0, 1]:.10f}, {q[1, 0]:.10f}, {q[1, 1]:.10f}\n"


def _coordinates(particle) -> np.ndarray:
    return np.asarray(particle.q, dtype=float).ravel()


def _frame_path(directory, file_name: str, index: int, index2: int) -> Path:
    stem = f"{file_name}_{index}" if index2 == 0 else f"{file_name}_{index}_{index2}"
    return Path(directory) / "Frames" / f"{stem}.csv"


class SystemTrajectory:
    """Writes frames and trajectories of the particle positions of a molecule."""

    def __init__(self, molecule, box=None) -> None:
        self.molecule = molecule
        self.box = box

    def print_positions(
        self,
        file_name: str,
        index: int,
        index2: int = 0,
        directory: str | Path = "Observables",
    ) -> Path:
        """Write one line of coordinates per particle to ``Frames/``."""
        path = _frame_path(directory, file_name, index, index2)
        with path.open("w") as fh:
            for particle in _particles(self.molecule):
                fh.write(", ".join(f"{x:.4f}" for x in _coordinates(particle)))
                fh.write(_orientation(particle) if _is_rigid(particle) else "\n")
        return path

    def print_simbox(
        self,
        file_name: str,
        index: int,
        index2: int = 0,
        directory: str | Path = "Observables",
    ) -> Path:
        """Write the ten corner points tracing the edges of the box to ``Frames/``."""
        if self.box is None:
            raise ValueError("no simulation box has been set")
        s = np.asarray(self.box, dtype=float)
        points = [
            (0.0, 0.0, 0.0),
            (s[0, 0], 0.0, 0.0),
            (s[0, 0] + s[0, 1], s[1, 1], 0.0),
            (s[0, 1], s[1, 1], 0.0),
            (0.0, 0.0, 0.0),
            (s[0, 2], s[1, 2], s[2, 2]),
            (s[0, 0] + s[0, 2], s[1, 2], s[2, 2]),
            (s[0, 0] + s[0, 1] + s[0, 2], s[1, 1] + s[1, 2], s[2, 2]),
            (s[0, 1] + s[0, 2], s[1, 1] + s[1, 2], s[2, 2]),
            (s[0, 2], s[1, 2], s[2, 2]),
        ]
        path = _frame_path(directory, file_name, index, index2)
        with path.open("w") as fh:
            for x, y, z in points:
                fh.write(f"{x:.3f}, {y:.3f}, {z:.3f}\n")
        return path

    def append_positions(
        self,
        file_name: str,
        time: float,
        index: int | None = None,
        directory: str | Path = "Observables",
    ) -> Path:
        """Append the time and every particle's coordinates as one record."""
        stem = file_name if index is None else f"{file_name}_{index}"
        path = Path(directory) / f"{stem}.csv"
        with path.open("a") as fh:
            fh.write(f"{time:1.7e}")
            for particle in _particles(self.molecule):
                for x in _coordinates(particle):
                    fh.write(f", {x:.4f}")
                if _is_rigid(particle):
                    fh.write(_orientation(particle))
            fh.write("\n")
        return path


class SystemHistogramTrajectory(SystemTrajectory):
    """Histograms of every coordinate direction of the particle positions."""

    def __init__(
        self,
        molecule,
        mins: Sequence[float],
        maxs: Sequence[float],
        bins: Sequence[int],
    ) -> None:
        super().__init__(molecule)
        dim = int(molecule.dim)
        if len(mins) != dim:
            raise ValueError("need a minimum for every dimension")
        if len(maxs) != dim:
            raise ValueError("need a maximum for every dimension")
        if len(bins) != dim:
            raise ValueError("need a number of bins for every dimension")
        self.distributions = [
            Histogram(low, up, n) for low, up, n in zip(mins, maxs, bins)
        ]

    def update(self, weight: float | None = None) -> None:
        """Add every coordinate of every particle to its histogram."""
        for particle in _particles(self.molecule):
            for hist, x in zip(self.distributions, _coordinates(particle)):
                if weight is None:
                    hist.observe(x)
                else:
                    hist.observe(x, weight)

    def write(
        self,
        file_name: str,
        index: int | None = None,
        directory: str | Path = "Observables",
    ) -> list[Path]:
        """Append ``centre, count, pdf`` of each direction's bins to its own file."""
        paths = []
        for i, hist in enumerate(self.distributions):
            stem = f"{file_name}_{i}" if index is None else f"{file_name}_{index}_{i}"
            path = Path(directory) / f"{stem}.csv"
            with path.open("a") as fh:
                for j in range(hist.nbins()):
                    fh.write(
                        f"{hist.bin_center(j):1.7e}, {hist.value(j):1.7e}, "
                        f"{hist.pdf(j):1.7e}\n"
                    )
            paths.append(path)
        return paths