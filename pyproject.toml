[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shortpath"
version = "0.1.0"
description = "Dijkstra shortest paths over weighted graphs, driven by a small instruction language"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "dijkstra", "shortest-path", "min-heap", "adjacency-list"]
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
shortpath = "shortpath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shortpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
