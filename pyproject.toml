[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "cablesway"
version = "0.1.0"
description = "Trajectory generation and oscillation experiments for cable-suspended robots"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "trajectory", "cable-suspended", "oscillation", "simulation"]
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
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["cablesway*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
