import logging
import math
from typing import List, Tuple

from points_api.constants import JITTER_FRACTION
from .point import Point
from .prng import RandomSource

logger = logging.getLogger(__name__)


def grid_dimensions(num_points: int) -> Tuple[int, int]:
    """Return ``(rows, cols)`` of the near-square grid holding ``num_points`` cells."""
    cols = int(math.ceil(math.sqrt(num_points)))
    rows = int(math.ceil(num_points / cols))
    return rows, cols


def generate_jittered_grid_points(
    num_points: int,
    prng: RandomSource,
    fill_circle: bool = True,
    jitter: float = JITTER_FRACTION,
) -> List[Point]:
    """One sample per cell of a near-square grid, displaced from the cell center.

    ``jitter`` is the displacement amplitude as a fraction of the cell size,
    so ``0`` yields the regular grid and ``1`` lets a sample reach any point of
    its cell. With ``fill_circle`` samples outside the inscribed disk are
    dropped and fewer than ``num_points`` may come back.
    """
    if num_points <= 0:
        raise ValueError(f"num_points must be positive, got {num_points}")
    if not 0.0 <= jitter <= 1.0:
        raise ValueError(f"jitter must be within [0, 1], got {jitter}")

    rows, cols = grid_dimensions(num_points)
    cell_w = 1.0 / cols
    cell_h = 1.0 / rows

    points = []
    for row in range(rows):
        for col in range(cols):
            dx = (prng.random_float() - 0.5) * jitter * cell_w
            dy = (prng.random_float() - 0.5) * jitter * cell_h
            p = Point((col + 0.5) * cell_w + dx, (row + 0.5) * cell_h + dy)
            if fill_circle and not p.is_in_circle():
                continue
            points.append(p)

    logger.debug(
        f"[generate_jittered_grid_points] {rows}x{cols} grid, jitter={jitter}, kept {len(points)} points"
    )
    return points
