[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wireface"
version = "0.1.0"
description = "Data interfaces for wire-chamber detector simulation: wire planes, depositions, frames, traces and data-flow node bases."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["physics", "detector", "wire-chamber", "liquid-argon", "tpc", "data-flow"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["wireface"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
