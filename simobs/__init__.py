"""Running averages, histograms and CSV-writing observables for particle simulations."""

__version__ = "0.1.0"