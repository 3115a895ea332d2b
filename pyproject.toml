[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simobs"
version = "0.1.0"
description = "Running observables, histograms and CSV writers for particle simulations"
requires-python = ">=3.10"
keywords = ["molecular dynamics", "observables", "statistics", "histogram", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["simobs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
