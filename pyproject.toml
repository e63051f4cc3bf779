[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planarfive"
version = "0.1.0"
description = "Five-colouring of planar graphs by vertex reduction and by greedy assignment with Kempe chain repair"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "planar", "coloring", "five-color", "kempe-chain", "triangulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
planarfive = "planarfive.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["planarfive"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
