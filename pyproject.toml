[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liegroups"
version = "0.1.0"
description = "The Lie groups SO(2) and SE(2) with tangent spaces and analytic Jacobians, plus residual helpers for least-squares estimation"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["lie groups", "lie theory", "SO2", "SE2", "robotics", "estimation", "jacobians"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["liegroups"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
