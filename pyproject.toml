[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foamcore"
version = "0.1.0"
description = "Core building blocks for finite-volume field computations: vectors, fields, executors, dictionaries and runtime selection"
requires-python = ">=3.10"
dependencies = []
keywords = ["cfd", "finite-volume", "fields", "simulation", "numerics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["foamcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
