"""Treetop tree house: visibility and scenic scores in a grid of tree heights."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from math import prod
from pathlib import Path

Grid = list[list[int]]

DEFAULT_INPUT = "08_12.txt"


def parse_grid(lines: Iterable[str]) -> Grid:
    """Read rows of single-digit heights; blank lines are ignored."""
    grid: Grid = []
    for line in lines:
        if not line:
            continue
        if not line.isdigit():
            raise ValueError(f"invalid row of tree heights: {line!r}")
        grid.append([int(char) for char in line])
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("rows of the grid have different lengths")
    return grid


def _lines_of_sight(grid: Grid, y: int, x: int) -> list[Sequence[int]]:
    """Heights seen from the tree at (y, x), nearest first: left, right, up, down."""
    row = grid[y]
    column = [other[x] for other in grid]
    return [
        row[:x][::-1],
        row[x + 1:],
        column[:y][::-1],
        column[y + 1:],
    ]


def _is_visible(grid: Grid, y: int, x: int) -> bool:
    height = grid[y][x]
    return any(
        all(tree < height for tree in sight)
        for sight in _lines_of_sight(grid, y, x)
    )


def _non_empty_grid(lines: Iterable[str]) -> Grid:
    grid = parse_grid(lines)
    if not grid:
        raise ValueError("the grid holds no trees")
    return grid


def count_visible_trees(lines: Iterable[str]) -> int:
    """Count the trees visible from outside the grid in at least one direction."""
    grid = _non_empty_grid(lines)
    return sum(
        1
        for y, row in enumerate(grid)
        for x, _ in enumerate(row)
        if _is_visible(grid, y, x)
    )


def _viewing_distance(height: int, sight: Iterable[int]) -> int:
    distance = 0
    for tree in sight:
        distance += 1
        if tree >= height:
            break
    return distance


def scenic_score(grid: Grid, y: int, x: int) -> int:
    """Product of the viewing distances from the tree at (y, x) in all four directions."""
    height = grid[y][x]
    return prod(
        _viewing_distance(height, sight) for sight in _lines_of_sight(grid, y, x)
    )


def highest_scenic_score(lines: Iterable[str]) -> int:
    """The best scenic score of any tree in the grid."""
    grid = parse_grid(lines)
    return max(
        (
            scenic_score(grid, y, x)
            for y, row in enumerate(grid)
            for x, _ in enumerate(row)
        ),
        default=0,
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Treetop tree house puzzle")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    lines = Path(args.input).read_text(encoding="utf-8").splitlines()

    print("Puzzle du 08/12 Partie 1")
    print(f"nombre d'arbres visibles : {count_visible_trees(lines)}")
    print("Puzzle du 08/12 Partie 2")
    print(f"valeur panoramique la plus élevée : {highest_scenic_score(lines)}")


if __name__ == "__main__":
    main()