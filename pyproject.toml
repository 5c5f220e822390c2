[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brc"
version = "0.1.0"
description = "Aggregate per-station min, mean and max temperatures from large measurement files"
requires-python = ">=3.10"
dependencies = []
keywords = ["aggregation", "measurements", "temperature", "statistics", "one-billion-rows"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
brc = "brc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["brc"]

[tool.pytest.ini_options]
addopts = "-ra"
