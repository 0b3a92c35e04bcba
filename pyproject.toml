[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "furysim"
version = "0.1.0"
description = "Building blocks for a warrior combat simulator: statistics, hit tables, rage, timing and damage bookkeeping."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "combat", "statistics", "dps", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["furysim"]

[tool.pytest.ini_options]
addopts = "-ra"
