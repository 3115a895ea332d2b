"""Radial distribution function of particle separations."""

from __future__ import annotations

import math
from pathlib import Path

import numpy as np

from .average import AverageObservable
from .base import SystemObservable
from .histogram import Histogram


class RadialDistObservable(SystemObservable):
    """Histogram of pair separations normalised to the radial distribution g(r).

    Call :meth:`bump_recstep` once per step with the current volume, then
    :meth:`update` for every pair separation of that step.
    """

    def __init__(
        self,
        rmin: float,
        rmax: float,
        n: int,
        rec_freq: int,
        rec_thresh: int,
        nparticles: int,
    ) -> None:
        self._distribution = Histogram(rmin, rmax, n)
        self._density = AverageObservable()
        super().__init__(rec_freq, rec_thresh)
        self._number_of_particles = int(nparticles)
        self._local_rec_step = False

    def bump_recstep(self, volume: float) -> None:
        """Advance the step counters and, on a recording step, note the density."""
        self._local_rec_step = self.rec_step()
        if self._local_rec_step:
            self._density.observe(self._number_of_particles / float(volume))

    def update(self, r: float) -> None:
        """Add a pair separation if the current step is recorded."""
        if self._local_rec_step:
            self._distribution.observe(r)

    def rpdf_3d(self, i: int) -> float:
        """Radial distribution in bin ``i`` normalised by the mean density."""
        hist = self._distribution
        rho = self._density.average()
        r = hist.lower_bin(i)
        dr = hist.bin_width(i)
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(
                np.float64(hist.pdf(i)) / np.float64(rho * 4.0 * math.pi * r**2 * dr)
            )

    def write(
        self,
        file_name: str,
        time: float,
        index: int,
        directory: str | Path = "Observables",
    ) -> Path:
        """Append ``centre, count, g(r)`` for every bin to the CSV file."""
        path = Path(directory) / f"{file_name}_{index}.csv"
        hist = self._distribution
        with path.open("a") as fh:
            for i in range(hist.nbins()):
                fh.write(
                    f"{hist.bin_center(i):1.7e}, {hist.value(i):1.7e}, "
                    f"{self.rpdf_3d(i):1.7e}\n"
                )
        return path

    def average(self) -> float:
        raise TypeError("radial distribution cannot use average")

    def instant(self) -> float:
        raise TypeError("radial distribution cannot use instant")

    def reset(self, rec_freq: int, rec_thresh: int) -> None:
        super().reset(rec_freq, rec_thresh)
        self._density.clear()
        self._distribution.clear()