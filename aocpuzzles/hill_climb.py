"""Hill climbing: fewest steps from the start square to the best signal."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Sequence
from math import hypot
from pathlib import Path

from aocpuzzles.hill_graph import END_VALUE, START_VALUE, Node, Point, Tree

DEFAULT_INPUT = "12_12.txt"

Heightmap = list[list[int]]
Position = tuple[int, int]

# Up, down, left, right, as (dy, dx).
_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


def parse_heightmap(lines: Iterable[str]) -> Heightmap:
    """Read the map; ``S`` sits just below ``a`` and ``E`` just above ``z``."""
    heightmap: Heightmap = []
    for line in lines:
        if not line:
            continue
        row = []
        for char in line:
            if char == "S":
                row.append(START_VALUE)
            elif char == "E":
                row.append(END_VALUE)
            else:
                row.append(ord(char))
        heightmap.append(row)
    return heightmap


def find_position(heightmap: Sequence[Sequence[int]], value: int) -> Position:
    """The ``(y, x)`` of the first square holding ``value``."""
    for y, row in enumerate(heightmap):
        if value in row:
            return y, list(row).index(value)
    raise ValueError(f"Aucune position trouvée pour la valeur {value}")


def possible_ways(
    heightmap: Sequence[Sequence[int]],
    position: Position,
    target: Position,
    value: int,
    visited: Iterable[Position],
) -> list[tuple[Position, int]]:
    """Neighbouring squares that can be climbed to, nearest to ``target`` first.

    A square may be at most one higher than ``value``; squares in ``visited``
    are left out.
    """
    visited = set(visited)
    ways = []
    for dy, dx in _MOVES:
        y, x = position[0] + dy, position[1] + dx
        if y < 0 or x < 0 or (y, x) in visited:
            continue
        if y >= len(heightmap) or x >= len(heightmap[y]):
            continue
        next_value = heightmap[y][x]
        if next_value - value > 1:
            continue
        ways.append(((y, x), next_value))
    ways.sort(key=lambda way: hypot(way[0][0] - target[0], way[0][1] - target[1]))
    return ways


def build_tree(heightmap: Heightmap) -> Tree:
    """Discover the squares reachable from the start until the end is found."""
    start = find_position(heightmap, START_VALUE)
    target = find_position(heightmap, END_VALUE)
    tree = Tree(start, START_VALUE)

    queue: deque[tuple[Node, frozenset[Position]]] = deque(
        [(tree.root, frozenset([start]))]
    )
    while queue:
        node, visited = queue.popleft()
        if tree.end is not None:
            break
        current = (node.point.y, node.point.x)
        for (y, x), value in possible_ways(
            heightmap, current, target, node.point.value, visited
        ):
            existing = tree.find_by_position((y, x))
            if existing is not None:
                node.add_child(existing)
                continue
            child = Node(Point(x, y, value))
            tree.add(child)
            node.add_child(child)
            queue.append((child, visited | {(y, x)}))
    return tree


def fewest_steps(lines: Iterable[str]) -> int:
    """Fewest steps from ``S`` to ``E``; raises ``ValueError`` if ``E`` is unreachable."""
    return build_tree(parse_heightmap(lines)).count_steps()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Hill climbing puzzle")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    lines = Path(args.input).read_text(encoding="utf-8").splitlines()
    heightmap = parse_heightmap(lines)

    print("Puzzle du 12/12 Partie 1")
    print(f"Position finale: {find_position(heightmap, END_VALUE)}")
    print(f"Nombre de pas : {build_tree(heightmap).count_steps()}")


if __name__ == "__main__":
    main()