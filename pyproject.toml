[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "algodrills"
version = "0.1.0"
description = "Classic algorithm drills: greedy, dynamic programming, graph search, stacks, queues, strings and trees."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "dynamic-programming", "greedy", "graph", "stack", "strings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["algodrills*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
