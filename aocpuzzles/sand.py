"""Regolith reservoir: sand falling onto rock until it spills into the abyss."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from itertools import pairwise
from pathlib import Path

from aocpuzzles.rock_line import Direction, Line

Position = tuple[int, int]

DEFAULT_INPUT = "14_12.txt"
ORIGIN: Position = (500, 0)


def parse_rock_paths(lines: Iterable[str]) -> set[Line]:
    """Read paths such as ``"498,4 -> 498,6 -> 496,6"`` into rock segments."""
    rocks: set[Line] = set()
    for line in lines:
        coordinates = [coordinate.strip() for coordinate in line.split("->")]
        for start, end in pairwise(coordinates):
            rocks.add(Line.from_points(start, end))
    return rocks


def _rock_at(rocks: Iterable[Line], position: Position) -> bool:
    x, y = position
    for line in rocks:
        if line.direction is Direction.VERTICAL:
            if line.direction_coordinate == x and line.vertex_a <= y <= line.vertex_b:
                return True
        elif line.direction_coordinate == y and line.vertex_a <= x <= line.vertex_b:
            return True
    return False


def can_move(
    rocks: Iterable[Line], sand_grains: set[Position], position: Position
) -> bool:
    """Tell whether ``position`` is free of both rock and resting sand."""
    return position not in sand_grains and not _rock_at(rocks, position)


def next_drop_point(
    rocks: Iterable[Line], sand_grains: set[Position], position: Position
) -> Position | None:
    """Where a grain falling straight down from ``position`` lands.

    Returns ``None`` when nothing lies below, so the grain falls forever.
    """
    x, y = position
    obstacles = [grain_y for grain_x, grain_y in sand_grains if grain_x == x and grain_y > y]
    for line in rocks:
        if line.direction is Direction.VERTICAL:
            if line.direction_coordinate == x and line.vertex_a > y:
                obstacles.append(line.vertex_a)
        elif line.direction_coordinate > y and line.vertex_a <= x <= line.vertex_b:
            obstacles.append(line.direction_coordinate)
    if not obstacles:
        return None
    return x, min(obstacles) - 1


def _settle(
    rocks: Iterable[Line], sand_grains: set[Position], origin: Position
) -> Position | None:
    """Follow one grain from ``origin``; return where it rests, or ``None``."""
    position = next_drop_point(rocks, sand_grains, origin)
    while position is not None:
        for dx in (-1, 1):
            diagonal = (position[0] + dx, position[1] + 1)
            if can_move(rocks, sand_grains, diagonal):
                below = (diagonal[0], diagonal[1] + 1)
                if can_move(rocks, sand_grains, below):
                    position = next_drop_point(rocks, sand_grains, below)
                else:
                    position = diagonal
                break
        else:
            return position
    return None


def count_resting_sand(rocks: Iterable[Line], origin: Position = ORIGIN) -> int:
    """Count the grains that come to rest before one falls into the abyss."""
    rocks = list(rocks)
    sand_grains: set[Position] = set()
    while (resting := _settle(rocks, sand_grains, origin)) is not None:
        sand_grains.add(resting)
    return len(sand_grains)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Regolith reservoir puzzle")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    lines = Path(args.input).read_text(encoding="utf-8").splitlines()
    rocks = parse_rock_paths(lines)

    print("Puzzle du 14/12 Partie 1")
    print(f"sand unit count before fall : {count_resting_sand(rocks, ORIGIN)}")


if __name__ == "__main__":
    main()