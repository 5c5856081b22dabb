[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recurkit"
version = "0.1.0"
description = "Backtracking, recursion, linked-list and binary-tree algorithms as plain Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "recursion",
    "backtracking",
    "binary tree",
    "linked list",
    "sudoku",
    "n-queens",
    "combinatorics",
    "merge sort",
]
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
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["recurkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
