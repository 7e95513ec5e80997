"""Straight segments of rock, horizontal or vertical, in the cave scan."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Orientation of a rock segment."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def between(cls, x_a: int, x_b: int) -> Direction:
        """A segment whose ends share the same x is vertical."""
        return cls.VERTICAL if x_a == x_b else cls.HORIZONTAL


def _parse_point(point: str) -> tuple[int, int]:
    parts = point.split(",")
    if len(parts) < 2:
        raise ValueError(f"invalid point: {point!r}")
    return int(parts[0].strip()), int(parts[1].strip())


@dataclass(frozen=True, eq=False)
class Line:
    """A rock segment.

    ``direction_coordinate`` is the y of a horizontal segment or the x of a
    vertical one; ``vertex_a`` and ``vertex_b`` bound the other coordinate,
    smallest first.
    """

    direction: Direction
    direction_coordinate: int
    vertex_a: int
    vertex_b: int

    @classmethod
    def from_points(cls, point_a: str, point_b: str) -> Line:
        """Build the segment between two points written as ``"x,y"``."""
        x_a, y_a = _parse_point(point_a)
        x_b, y_b = _parse_point(point_b)
        direction = Direction.between(x_a, x_b)
        if direction is Direction.HORIZONTAL:
            return cls(direction, y_a, min(x_a, x_b), max(x_a, x_b))
        return cls(direction, x_a, min(y_a, y_b), max(y_a, y_b))

    def _lowest_point_y(self) -> int:
        if self.direction is Direction.HORIZONTAL:
            return self.direction_coordinate
        return self.vertex_b

    def highest_y(self, other: Line) -> int:
        """The largest y reached by either segment."""
        return max(self._lowest_point_y(), other._lowest_point_y())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return (
            self.direction == other.direction
            and self.direction_coordinate == other.direction_coordinate
            and self.vertex_a in (other.vertex_a, other.vertex_b)
            and self.vertex_b in (other.vertex_b, other.vertex_a)
        )

    def __hash__(self) -> int:
        return hash((self.direction, self.direction_coordinate))