[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parlab"
version = "0.1.0"
description = "Graph traversal, sorting and reduction exercises in sequential and parallel-style variants"
requires-python = ">=3.10"
dependencies = []
keywords = ["bfs", "dfs", "bubble sort", "odd-even sort", "merge sort", "reduction", "threads"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parlab-graph = "parlab.graph:main"
parlab-sort = "parlab.sorting:main"
parlab-reduce = "parlab.reduction:main"

[tool.hatch.build.targets.wheel]
packages = ["parlab"]

[tool.pytest.ini_options]
addopts = "-ra"
