[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nocsim"
version = "0.1.0"
description = "Cycle-based simulator of packet traffic on a 2D-mesh network-on-chip"
requires-python = ">=3.10"
dependencies = []
keywords = ["network-on-chip", "noc", "mesh", "router", "simulation", "xy-routing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nocsim = "nocsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nocsim"]

[tool.pytest.ini_options]
addopts = "-ra"
