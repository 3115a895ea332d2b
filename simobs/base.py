"""Base class for observables recorded at a fixed step frequency."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class SystemObservable(ABC):
    """Observable that is recorded every ``rec_freq`` steps once
    ``rec_thresh`` steps have passed."""

    def __init__(self, rec_freq: int, rec_thresh: int) -> None:
        self.reset(rec_freq, rec_thresh)

    @abstractmethod
    def update(self) -> None:
        """Take an observation of the system."""

    @abstractmethod
    def average(self) -> float:
        """Long-term average of the observable."""

    @abstractmethod
    def instant(self) -> float:
        """Most recent value of the observable."""

    def write(
        self,
        file_name: str,
        time: float,
        index: int | None = None,
        directory: str | Path = "Observables",
    ) -> Path:
        """Append ``time, instant, average`` to the observable's CSV file."""
        stem = file_name if index is None else f"{file_name}_{index}"
        path = Path(directory) / f"{stem}.csv"
        with path.open("a") as fh:
            fh.write(f"{time:1.7e}, {self.instant():1.7e}, {self.average():1.7e}\n")
        return path

    def rec_step(self) -> bool:
        """Advance the step counters and report whether this step is recorded."""
        record = False
        if self._rec_count % self._rec_freq == 0 and self._rec_count != 0:
            record = True
            self._rec_count = 1
            if self._rec_tot_count < self._rec_thresh:
                record = False
        else:
            self._rec_count += 1

        if self._rec_tot_count < self._rec_thresh:
            self._rec_tot_count += 1

        return record

    def reset(self, rec_freq: int, rec_thresh: int) -> None:
        """Set a new frequency and threshold and restart the step counters."""
        self._rec_freq = int(rec_freq)
        self._rec_thresh = int(rec_thresh)
        self._rec_count = 0
        self._rec_tot_count = 0