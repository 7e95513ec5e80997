"""Regolith reservoir, part two: sand piling on an endless floor until it blocks the source."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from pathlib import Path

from aocpuzzles.rock_line import Direction, Line
from aocpuzzles.sand import ORIGIN, Position, can_move, next_drop_point, parse_rock_paths

DEFAULT_INPUT = "14_12.txt"
FLOOR_OFFSET = 2


def floor_coordinate(rocks: Iterable[Line]) -> int:
    """The y of the floor: two below the lowest point of the rock scan.

    The scan must hold at least one horizontal and one vertical segment.
    """
    rocks = list(rocks)
    horizontal = [line for line in rocks if line.direction is Direction.HORIZONTAL]
    vertical = [line for line in rocks if line.direction is Direction.VERTICAL]
    if not horizontal or not vertical:
        raise ValueError("the scan needs both horizontal and vertical rock segments")
    lowest_horizontal = max(horizontal, key=lambda line: line.direction_coordinate)
    lowest_vertical = max(vertical, key=lambda line: line.vertex_b)
    return lowest_vertical.highest_y(lowest_horizontal) + FLOOR_OFFSET


def _is_free(
    rocks: list[Line], sand_grains: set[Position], position: Position, floor: int
) -> bool:
    return position[1] < floor and can_move(rocks, sand_grains, position)


def _drop(
    rocks: list[Line], sand_grains: set[Position], position: Position, floor: int
) -> Position:
    landing = next_drop_point(rocks, sand_grains, position)
    if landing is None:
        return position[0], floor - 1
    return landing


def _settle(
    rocks: list[Line], sand_grains: set[Position], origin: Position, floor: int
) -> Position | None:
    """Follow one grain from ``origin``; return where it rests, or ``None``."""
    position = _drop(rocks, sand_grains, origin, floor)
    if position[1] < origin[1]:
        return None
    while True:
        for dx in (-1, 1):
            diagonal = (position[0] + dx, position[1] + 1)
            if _is_free(rocks, sand_grains, diagonal, floor):
                below = (diagonal[0], diagonal[1] + 1)
                if _is_free(rocks, sand_grains, below, floor):
                    position = _drop(rocks, sand_grains, below, floor)
                else:
                    position = diagonal
                break
        else:
            return position


def count_sand_until_blocked(
    rocks: Iterable[Line], origin: Position, floor: int
) -> int:
    """Count the grains that come to rest, the one blocking the source included."""
    rocks = list(rocks)
    sand_grains: set[Position] = set()
    while (resting := _settle(rocks, sand_grains, origin, floor)) is not None:
        sand_grains.add(resting)
        if resting[1] <= origin[1]:
            break
    return len(sand_grains)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Regolith reservoir puzzle, part two")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    lines = Path(args.input).read_text(encoding="utf-8").splitlines()
    rocks = parse_rock_paths(lines)

    print("Puzzle du 14/12 Partie 2")
    floor = floor_coordinate(rocks)
    print(f"floor : {floor}")
    count = count_sand_until_blocked(rocks, ORIGIN, floor)
    print(f"sand unit count before fall : {count}")


if __name__ == "__main__":
    main()