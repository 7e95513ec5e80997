"""Hill climbing, part two: fewest steps from any lowest border square to the best signal."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Sequence
from pathlib import Path

from aocpuzzles.hill_climb import find_position, parse_heightmap
from aocpuzzles.hill_graph import END_VALUE, START_VALUE, Node, Point, Tree

DEFAULT_INPUT = "12_12.txt"
LOWEST_VALUE = ord("a")

Heightmap = list[list[int]]
Position = tuple[int, int]

# Up, down, left, right, as (dy, dx).
_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _descent_ways(
    heightmap: Sequence[Sequence[int]], position: Position, value: int
) -> list[tuple[Position, int]]:
    """Neighbours reachable walking backwards: at most one lower than ``value``."""
    ways = []
    for dy, dx in _MOVES:
        y, x = position[0] + dy, position[1] + dx
        if y < 0 or x < 0 or y >= len(heightmap) or x >= len(heightmap[y]):
            continue
        next_value = heightmap[y][x]
        if value - next_value > 1:
            continue
        ways.append(((y, x), next_value))
    return ways


def build_descent_tree(heightmap: Heightmap) -> Tree:
    """Walk backwards from ``E``, giving every reachable square its fewest step count."""
    end = find_position(heightmap, END_VALUE)
    tree = Tree(end, END_VALUE)

    queue: deque[Node] = deque([tree.root])
    while queue:
        node = queue.popleft()
        step = node.position + 1
        current = (node.point.y, node.point.x)
        for (y, x), value in _descent_ways(heightmap, current, node.point.value):
            existing = tree.find_by_position((y, x))
            if existing is not None:
                if existing is node:
                    continue
                node.add_child(existing)
                if existing is not tree.root and step < existing.position:
                    existing.position = step
                    queue.append(existing)
                continue
            child = Node(Point(x, y, value), position=step)
            tree.add(child)
            node.add_child(child)
            queue.append(child)
    return tree


def is_possible_start(
    heightmap: Sequence[Sequence[int]], y: int, x: int, value: int
) -> bool:
    """Tell whether some neighbour of (y, x) can be climbed to from ``value``."""
    neighbours = [(y + 1, x), (y, x + 1)]
    if y != 0:
        neighbours.append((y - 1, x))
    if x != 0:
        neighbours.append((y, x - 1))
    for ny, nx in neighbours:
        if ny >= len(heightmap) or nx >= len(heightmap[ny]):
            continue
        if value + 1 >= heightmap[ny][nx]:
            return True
    return False


def possible_starts(heightmap: Sequence[Sequence[int]]) -> list[Position]:
    """Lowest squares on the border of the map from which a climb can begin."""
    if not heightmap:
        return []
    height = len(heightmap)
    width = len(heightmap[0])
    starts = []
    for y, row in enumerate(heightmap):
        for x, value in enumerate(row):
            on_border = x in (0, width - 1) or y in (0, height - 1)
            if not on_border:
                continue
            if value in (START_VALUE, LOWEST_VALUE) and is_possible_start(
                heightmap, y, x, value
            ):
                starts.append((y, x))
    return starts


def lowest_step(tree: Tree, starts: Iterable[Position]) -> int:
    """The smallest step count among the start squares present in the tree."""
    steps = [
        node.position
        for node in map(tree.find_by_position, starts)
        if node is not None
    ]
    if not steps:
        raise ValueError("no start square can reach the end")
    return min(steps)


def fewest_steps_from_any_start(lines: Iterable[str]) -> int:
    """Fewest steps to ``E`` from the best lowest border square."""
    heightmap = parse_heightmap(lines)
    starts = possible_starts(heightmap)
    return lowest_step(build_descent_tree(heightmap), starts)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Hill climbing puzzle, part two")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    lines = Path(args.input).read_text(encoding="utf-8").splitlines()

    print("Puzzle du 12/12 Partie 2")
    print(f"Plus petit nombre de pas : {fewest_steps_from_any_start(lines)}")


if __name__ == "__main__":
    main()