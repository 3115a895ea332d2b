"""Histogram of the magnetisation of a molecule.

The molecule is expected to provide a ``magnetisation()`` method.
"""

from __future__ import annotations

from pathlib import Path

from .base import SystemObservable
from .histogram import Histogram


class MagnetisationObservable(SystemObservable):
    """Records the distribution of the magnetisation in a histogram."""

    def __init__(
        self, molecule, mmin: float, mmax: float, n: int, rec_freq: int, rec_thresh: int
    ) -> None:
        super().__init__(rec_freq, rec_thresh)
        self.distribution = Histogram(mmin, mmax, n)
        self.molecule = molecule

    def update(self, weight: float | None = None) -> None:
        """On a recording step add the current magnetisation, optionally weighted."""
        if self.rec_step():
            value = self.molecule.magnetisation()
            if weight is None:
                self.distribution.observe(value)
            else:
                self.distribution.observe(value, weight)

    def write(
        self, file_name: str, index: int, directory: str | Path = "Observables"
    ) -> Path:
        """Append ``centre, count, pdf`` for every bin to the CSV file."""
        path = Path(directory) / f"{file_name}_{index}.csv"
        hist = self.distribution
        with path.open("a") as fh:
            for i in range(hist.nbins()):
                fh.write(
                    f"{hist.bin_center(i):1.7e}, {hist.value(i):1.7e}, {hist.pdf(i):1.7e}\n"
                )
        return path

    def average(self) -> float:
        raise TypeError("magnetisation cannot use average")

    def instant(self) -> float:
        raise TypeError("magnetisation cannot use instant")