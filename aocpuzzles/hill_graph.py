"""Graph of reachable squares on the hill heightmap, with step counting."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

START_VALUE = 96
END_VALUE = 123


@dataclass(eq=False)
class Point:
    """A square of the heightmap; two points are equal when at the same place."""

    x: int
    y: int
    value: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))


@dataclass(eq=False)
class Node:
    """A square in the graph, the squares reachable from it, and its step count.

    A ``position`` of 0 means no step count has been given yet.
    """

    point: Point
    children: list[Node] = field(default_factory=list)
    position: int = 0

    def add_child(self, child: Node) -> None:
        """Record that ``child`` can be reached from this node."""
        self.children.append(child)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.point == other.point

    def __hash__(self) -> int:
        return hash(self.point)


class Tree:
    """Every node discovered from a root square, indexed by ``(y, x)``."""

    def __init__(self, position: tuple[int, int], value: int) -> None:
        y, x = position
        self.root = Node(Point(x, y, value))
        self.end: Node | None = None
        self.nodes: list[Node] = []
        self._index: dict[tuple[int, int], Node] = {}
        self.add(self.root)

    def find_by_position(self, position: tuple[int, int]) -> Node | None:
        """The node at ``(y, x)``, or ``None`` when it has not been added."""
        return self._index.get(position)

    def add(self, node: Node) -> None:
        """Add a node; a node holding the end value becomes the end node."""
        if node.point.value == END_VALUE:
            self.end = node
        self.nodes.append(node)
        self._index.setdefault((node.point.y, node.point.x), node)

    def count_steps(self) -> int:
        """Give every node its step count from the root; return the end node's.

        Returns 0 when the end node cannot be reached.
        """
        end = self.end
        if end is None:
            raise ValueError("the tree has no end node")
        queue: deque[tuple[Node, int]] = deque([(self.root, 0)])
        while queue:
            node, step = queue.popleft()
            if end.position and end.position < step:
                continue
            step += 1
            for child in node.children:
                if child.position == 0 or step < child.position:
                    child.position = step
                    queue.append((child, step))
        return end.position