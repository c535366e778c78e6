[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchlab"
version = "0.1.0"
description = "Classic AI search, constraint-satisfaction and game-playing algorithms with small command-line programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "search",
    "a-star",
    "best-first",
    "bfs",
    "dfs",
    "csp",
    "backtracking",
    "minimax",
    "alpha-beta",
    "8-puzzle",
    "n-queens",
    "sudoku",
    "tic-tac-toe",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchlab-puzzle8 = "searchlab.puzzle8:main"
searchlab-routes = "searchlab.routes:main"
searchlab-traversal = "searchlab.traversal:main"
searchlab-missionaries = "searchlab.missionaries:main"
searchlab-waterjug = "searchlab.waterjug:main"
searchlab-nqueens = "searchlab.nqueens:main"
searchlab-cryptarithm = "searchlab.cryptarithm:main"
searchlab-graph-coloring = "searchlab.graph_coloring:main"
searchlab-sudoku = "searchlab.sudoku:main"
searchlab-magic-square = "searchlab.magic_square:main"
searchlab-minimax = "searchlab.minimax:main"
searchlab-alphabeta = "searchlab.alphabeta:main"

[tool.hatch.build.targets.wheel]
packages = ["searchlab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
