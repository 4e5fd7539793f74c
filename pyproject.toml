[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gaussmarkov"
version = "0.1.0"
description = "A 3D Gauss-Markov mobility model with memory, variability and a bounding box"
requires-python = ">=3.10"
dependencies = []
keywords = ["mobility", "gauss-markov", "simulation", "random-walk", "networking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gaussmarkov"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
