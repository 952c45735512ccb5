[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snowcover"
version = "0.1.0"
description = "Unit conversions, environmental physics relations and timestep bookkeeping for point snowcover modelling"
requires-python = ">=3.10"
dependencies = []
keywords = ["snow", "hydrology", "environmental physics", "energy balance", "timestep"]
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
    "Topic :: Scientific/Engineering :: Hydrology",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["snowcover"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
