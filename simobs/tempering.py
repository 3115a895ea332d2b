"""Observable of the temperature ladder in simulated tempering.

The method handed to the observable is expected to provide
``temperature_index()`` and ``temperature()``.
"""

from __future__ import annotations

from pathlib import Path

from .average import AverageObservable
from .base import SystemObservable


class SimTempTemperatureObservable(SystemObservable):
    """Tracks the current temperature index and target temperature every step."""

    def __init__(self, method) -> None:
        super().__init__(1, 0)
        self.method = method
        self._target = AverageObservable()
        self._index = AverageObservable()

    def update(self) -> None:
        """Observe the current index and temperature of the method."""
        self._index.observe(float(self.method.temperature_index()))
        self._target.observe(float(self.method.temperature()))

    def average(self) -> float:
        return self._target.average()

    def instant(self) -> float:
        return self._target.instant()

    def write(
        self,
        file_name: str,
        time: float,
        index: int = 0,
        directory: str | Path = "Observables",
    ) -> Path:
        """Append ``time, index, temperature, average temperature`` to the CSV file."""
        level = int(self._index.instant())
        # A zero-precision integer conversion prints nothing for zero.
        level_text = "" if level == 0 else str(level)
        path = Path(directory) / f"{file_name}_{index}.csv"
        with path.open("a") as fh:
            fh.write(
                f"{time:1.7e}, {level_text}, {self._target.instant():1.3e}, "
                f"{self._target.average():1.3e}\n"
            )
        return path