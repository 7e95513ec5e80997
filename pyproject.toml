[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocpuzzles"
version = "0.1.0"
description = "Solvers for a series of December programming puzzles: crates, ropes, packets, sand and hill climbing."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "simulation", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc-cleanup = "aocpuzzles.cleanup:main"
aoc-supply-stacks = "aocpuzzles.supply_stacks:main"
aoc-tuning = "aocpuzzles.tuning:main"
aoc-cpu = "aocpuzzles.cpu:main"
aoc-treehouse = "aocpuzzles.treehouse:main"
aoc-rope = "aocpuzzles.rope:main"
aoc-packets = "aocpuzzles.packets:main"
aoc-packet-tree = "aocpuzzles.packet_tree:main"
aoc-sand = "aocpuzzles.sand:main"
aoc-sand-floor = "aocpuzzles.sand_floor:main"
aoc-hill-climb = "aocpuzzles.hill_climb:main"
aoc-hill-descent = "aocpuzzles.hill_descent:main"

[tool.hatch.build.targets.wheel]
packages = ["aocpuzzles"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
