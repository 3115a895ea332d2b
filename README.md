# simobs

Observables for particle simulations. It provides running averages,
histograms, and writers that append values to CSV files while a run is
in progress.

## Install

    pip install simobs

To install the test dependencies, use `pip install simobs[test]`.

## Modules

- `simobs.average.AverageObservable`: running mean, population variance,
  the last observed value and the number of observations. These are read
  with `average()`, `variance()`, `instant()` and `count()`.
- `simobs.histogram.Histogram`: `n` equal bins over `[low, up)`, with
  weighted counts. It provides `value(i)`, `bin_center(i)`,
  `bin_width(i)`, `lower_bin(i)`, `pdf(i)` for the normalised density,
  `find_index(x)` and `clear()`. Values outside the range are ignored.
  An out-of-range bin index raises `IndexError`.
- `simobs.base.SystemObservable`: abstract base class. Its `rec_step()`
  method advances the step counters. It reports a step as recorded when
  the step falls on the recording frequency and the warm-up threshold has
  been passed. Its `write()` method appends `time, instant, average` to
  `<name>.csv`, or to `<name>_<index>.csv` when an index is given.
- `simobs.generators`: seeded `NormalGenerator`, `UniformGenerator` and
  `ExponentialGenerator`. Call one to draw a number.
- `simobs.box`: `SystemVolume`, which is the determinant of the box
  matrix, and `SystemPressure`. Also `calculate_pressure(s, v, k)`, which
  works from the box, virial and kinetic matrices in 2D or 3D.
- `simobs.energy`: `SystemEnergy` (kinetic plus potential) and
  `SystemPotentialEnergy`.
- `simobs.temperature`: `SystemTemperature` (kinetic),
  `SystemConfigurationalTemperature` and `SystemVirialTemperature`.
- `simobs.magnetisation.MagnetisationObservable`: histogram of
  `molecule.magnetisation()`, with optional weights.
- `simobs.radial.RadialDistObservable`: histogram of pair separations.
  It is normalised to g(r) using the mean number density.
- `simobs.order.OrderObservable`: plane-wave crystalline order parameter
  for each particle.
- `simobs.sphere_order`: `SphereOrderObservable`, a spherical-harmonic
  order parameter for each particle. Also `spherical_angles(dr)`.
- `simobs.trajectory`: `SystemTrajectory` writes position frames, box
  frames and appended trajectories. `SystemHistogramTrajectory` keeps a
  histogram of positions for each coordinate direction.
- `simobs.replica`: `ReplicaExchangeObservable` holds one observable per
  replica. `RETrajectoryObservable` holds one trajectory per replica.
- `simobs.tempering.SimTempTemperatureObservable`: tracks the temperature
  index and the temperature of a simulated-tempering method.
- `simobs.switching`: `IsWeightObservable` and `DisWeightObservable` hold
  one weighted observable per interpolation point of a single or double
  infinite switch.

## Example

    from simobs.average import AverageObservable
    from simobs.histogram import Histogram

    mean = AverageObservable()
    for value in (1.0, 2.0, 3.0):
        mean.observe(value)
    print(mean.average(), mean.variance(), mean.count())

    hist = Histogram(0.0, 1.0, 10)
    hist.observe(0.25)
    print(hist.bin_center(2), hist.value(2), hist.pdf(2))

## Writing files

Methods that write files take a `directory` argument, which defaults to
`Observables`. Some also use the subdirectories `Frames/` or `States/`.
These directories are not created for you; they must exist before you
write. Most writers append to their files. The frame writers overwrite
theirs.

## What it does not do

This package does not run simulations. It has no integrator, no force
field, no particle system and no command-line program. The observables
read from objects that you supply:

- a molecule with `particles` (a mapping or an iterable), `dim`, and as
  needed `potential()`, `laplace()` or `magnetisation()`;
- particles with `p`, `m`, `q`, `f` and, for rigid bodies, `Q`;
- method objects for tempering and switching, with the methods described
  in their module docstrings.