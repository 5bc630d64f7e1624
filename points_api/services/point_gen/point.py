import math
from dataclasses import dataclass


@dataclass
class Point:
    """A 2D sample. ``valid=False`` marks an empty grid cell, never a sample."""

    x: float
    y: float
    valid: bool = True

    @classmethod
    def empty(cls) -> "Point":
        return cls(0.0, 0.0, False)

    def is_in_rectangle(self) -> bool:
        return 0.0 <= self.x <= 1.0 and 0.0 <= self.y <= 1.0

    def is_in_circle(self) -> bool:
        fx = self.x - 0.5
        fy = self.y - 0.5
        return (fx * fx + fy * fy) <= 0.25

    def as_tuple(self) -> tuple:
        return (self.x, self.y)


@dataclass(frozen=True)
class GridPoint:
    """Integer cell address inside a :class:`Grid`."""

    x: int
    y: int


def get_distance(p1: Point, p2: Point) -> float:
    return math.sqrt((p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2)


def image_to_grid(point: Point, cell_size: float) -> GridPoint:
    # int() truncates toward zero, same as the cell addressing of the grid
    return GridPoint(int(point.x / cell_size), int(point.y / cell_size))
