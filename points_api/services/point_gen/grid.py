"""Uniform bucket grid used to reject Poisson-disk candidates."""
import math

import numpy as np

from points_api.constants import NEIGHBOURHOOD_CELLS
from .point import GridPoint, Point, image_to_grid


def unit_square_side(cell_size: float) -> int:
    """Cells per side so that both 0.0 and 1.0 map inside the grid."""
    if not (cell_size > 0 and math.isfinite(cell_size)):
        raise ValueError(f"cell_size must be a positive finite number, got {cell_size}")
    # same truncation as image_to_grid, so x == 1.0 lands in the last cell
    return int(1.0 / cell_size) + 1


class Grid:
    """Flat ``width * height`` buffer holding at most one point per cell.

    Cells are addressed by :class:`GridPoint` and stored at
    ``cell.y * width + cell.x``. Inserting into an occupied cell overwrites
    the previous occupant.
    """

    def __init__(self, width: int, height: int, cell_size: float, neighbourhood: int = NEIGHBOURHOOD_CELLS):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        if not (cell_size > 0 and math.isfinite(cell_size)):
            raise ValueError(f"cell_size must be a positive finite number, got {cell_size}")
        if neighbourhood <= 0:
            raise ValueError(f"neighbourhood must be positive, got {neighbourhood}")
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.neighbourhood = neighbourhood
        self._xs = np.zeros(width * height, dtype=float)
        self._ys = np.zeros(width * height, dtype=float)
        self._valid = np.zeros(width * height, dtype=bool)

    @classmethod
    def for_unit_square(cls, cell_size: float, neighbourhood: int = NEIGHBOURHOOD_CELLS) -> "Grid":
        """Allocate a square grid with enough cells to cover [0, 1] x [0, 1]."""
        n = unit_square_side(cell_size)
        return cls(n, n, cell_size, neighbourhood)

    def __len__(self) -> int:
        return int(self._valid.sum())

    def contains_cell(self, cell: GridPoint) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def _index(self, cell: GridPoint) -> int:
        return cell.y * self.width + cell.x

    def get(self, cell: GridPoint) -> Point:
        if not self.contains_cell(cell):
            raise IndexError(f"cell {cell} outside {self.width}x{self.height} grid")
        idx = self._index(cell)
        if not self._valid[idx]:
            return Point.empty()
        return Point(float(self._xs[idx]), float(self._ys[idx]))

    def insert(self, point: Point) -> None:
        cell = image_to_grid(point, self.cell_size)
        if not self.contains_cell(cell):
            raise IndexError(
                f"point ({point.x}, {point.y}) maps to cell {cell} outside {self.width}x{self.height} grid"
            )
        idx = self._index(cell)
        self._xs[idx] = point.x
        self._ys[idx] = point.y
        self._valid[idx] = point.valid

    def is_in_neighbourhood(self, point: Point, min_dist: float, cell_size: float) -> bool:
        """Return True if a stored point lies strictly closer than ``min_dist``.

        Only the cells ``[addr - D, addr + D)`` on both axes are scanned, where
        ``D`` is ``self.neighbourhood``. The upper bound is exclusive, so the
        window reaches one cell further below the query than above it.
        """
        cell = image_to_grid(point, cell_size)
        d = self.neighbourhood
        i0 = max(cell.x - d, 0)
        i1 = min(cell.x + d, self.width)
        j0 = max(cell.y - d, 0)
        j1 = min(cell.y + d, self.height)
        if i0 >= i1 or j0 >= j1:
            return False

        shape = (self.height, self.width)
        valid = self._valid.reshape(shape)[j0:j1, i0:i1]
        if not valid.any():
            return False
        dx = self._xs.reshape(shape)[j0:j1, i0:i1][valid] - point.x
        dy = self._ys.reshape(shape)[j0:j1, i0:i1][valid] - point.y
        return bool(np.any(np.sqrt(dx * dx + dy * dy) < min_dist))
