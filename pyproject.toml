[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "temporalpairs"
version = "0.1.0"
description = "Score node pairs of a temporal graph by shortest temporal path betweenness and sample pairs by score"
requires-python = ">=3.10"
dependencies = []
keywords = ["temporal graph", "betweenness", "shortest paths", "sampling", "network analysis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
temporalpairs = "temporalpairs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["temporalpairs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
