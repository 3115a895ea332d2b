"""Uniformly binned, weighted histogram."""

from __future__ import annotations

import bisect
import math
import threading


class Histogram:
    """Histogram of ``n`` equal bins covering ``[low, up)``.

    Values outside the range are silently ignored when observed.
    """

    def __init__(self, low: float, up: float, n: int) -> None:
        n = int(n)
        if n <= 0:
            raise ValueError("histogram needs at least one bin")
        low = float(low)
        up = float(up)
        if not low < up:
            raise ValueError("histogram lower limit must be below the upper limit")
        self._n = n
        self._edges = [((n - i) / n) * low + (i / n) * up for i in range(n + 1)]
        self._counts = [0.0] * n
        self._lock = threading.Lock()

    def _locate(self, x: float) -> int | None:
        if not self._edges[0] <= x < self._edges[-1]:
            return None
        return min(bisect.bisect_right(self._edges, x) - 1, self._n - 1)

    def _check(self, i: int) -> None:
        if not 0 <= i < self._n:
            raise IndexError(f"bin {i} is outside the histogram of {self._n} bins")

    def observe(self, value: float, weight: float = 1.0) -> None:
        """Add ``weight`` to the bin holding ``value``."""
        index = self._locate(float(value))
        if index is None:
            return
        with self._lock:
            self._counts[index] += float(weight)

    def value(self, i: int) -> float:
        """Content of bin ``i``."""
        self._check(i)
        return self._counts[i]

    def nbins(self) -> int:
        """Number of bins."""
        return self._n

    def bin_width(self, i: int) -> float:
        """Width of bin ``i``."""
        self._check(i)
        return self._edges[i + 1] - self._edges[i]

    def bin_center(self, i: int) -> float:
        """Centre of bin ``i``."""
        self._check(i)
        return 0.5 * (self._edges[i + 1] + self._edges[i])

    def pdf(self, i: int) -> float:
        """Content of bin ``i`` normalised to a probability density."""
        dx = self.bin_width(i)
        total = sum(self._counts)
        if total == 0.0:
            return math.nan
        return self._counts[i] / (total * dx)

    def lower_bin(self, i: int) -> float:
        """Lower edge of bin ``i``."""
        self._check(i)
        return self._edges[i]

    def find_index(self, x: float) -> int:
        """Index of the bin that ``x`` falls in."""
        index = self._locate(float(x))
        if index is None:
            raise ValueError(f"couldn't locate {x:1.3e} in histogram")
        return index

    def clear(self) -> None:
        """Set every bin to zero."""
        with self._lock:
            self._counts = [0.0] * self._n