"""Poisson-disk point generator.

Fast Poisson Disk Sampling in Arbitrary Dimensions, R. Bridson, SIGGRAPH 2007,
restricted to the unit square and its inscribed disk.

Usage::

    prng = DefaultPRNG(seed=42)
    points = generate_poisson_points(2000, prng)
"""
import logging
import math
from typing import Callable, List

from points_api.constants import (
    MAX_GRID_CELLS,
    MAX_SEED_ATTEMPTS,
    NEIGHBOURHOOD_CELLS,
    NEW_POINTS_PER_SAMPLE,
    PROGRESS_INTERVAL,
)
from .grid import Grid, unit_square_side
from .point import Point
from .prng import RandomSource

logger = logging.getLogger(__name__)


class SamplingError(RuntimeError):
    """Raised when no valid first sample could be drawn for the requested shape."""


def default_min_dist(num_points: int) -> float:
    """Minimal distance estimate that roughly fills the unit area with ``num_points``."""
    return math.sqrt(float(num_points)) / float(num_points)


def pop_random(points: List[Point], prng: RandomSource) -> Point:
    """Remove and return a uniformly chosen element of ``points``."""
    idx = prng.random_int(len(points) - 1)
    return points.pop(idx)


def generate_random_point_around(point: Point, min_dist: float, prng: RandomSource) -> Point:
    # radius should be between min_dist and 2 * min_dist
    radius = min_dist * (prng.random_float() + 1.0)
    angle = 2.0 * math.pi * prng.random_float()
    return Point(point.x + radius * math.cos(angle), point.y + radius * math.sin(angle))


def _generate_first_point(
    prng: RandomSource, fits: Callable[[Point], bool], max_attempts: int
) -> Point:
    for _ in range(max_attempts):
        point = Point(prng.random_float(), prng.random_float())
        if fits(point):
            return point
    raise SamplingError(f"no valid first point after {max_attempts} attempts")


def generate_poisson_points(
    num_points: int,
    prng: RandomSource,
    new_points_per_sample: int = NEW_POINTS_PER_SAMPLE,
    fill_circle: bool = True,
    min_dist: float = -1.0,
    *,
    neighbourhood: int = NEIGHBOURHOOD_CELLS,
    max_seed_attempts: int = MAX_SEED_ATTEMPTS,
) -> List[Point]:
    """Generate samples no closer than ``min_dist`` to each other.

    Parameters
    ----------
    num_points:
        Target number of samples. The count is checked before each active
        sample is expanded, so the last expansion may add up to
        ``new_points_per_sample - 1`` extra samples. Fewer are returned when
        the active list runs dry first.
    prng:
        Source of uniform floats and integers.
    new_points_per_sample:
        Candidates tried around each active sample (Bridson's ``k``).
    fill_circle:
        ``True`` to fill the disk inscribed in the unit square, ``False`` to
        fill the square itself.
    min_dist:
        Minimal distance between samples. Any negative value selects
        :func:`default_min_dist`.

    Returns
    -------
    list of Point
        Samples in acceptance order.
    """
    if num_points <= 0:
        raise ValueError(f"num_points must be positive, got {num_points}")
    if new_points_per_sample < 1:
        raise ValueError(f"new_points_per_sample must be at least 1, got {new_points_per_sample}")
    if min_dist < 0.0:
        min_dist = default_min_dist(num_points)
    elif not (min_dist > 0.0 and math.isfinite(min_dist)):
        raise ValueError(f"min_dist must be a positive finite number or negative for default, got {min_dist}")

    cell_size = min_dist / math.sqrt(2.0)
    grid_side = unit_square_side(cell_size)
    if grid_side * grid_side > MAX_GRID_CELLS:
        raise ValueError(
            f"min_dist={min_dist} needs a {grid_side}x{grid_side} grid, more than {MAX_GRID_CELLS} cells"
        )
    grid = Grid.for_unit_square(cell_size, neighbourhood)
    logger.debug(
        f"[generate_poisson_points] num_points={num_points}, k={new_points_per_sample}, "
        f"fill_circle={fill_circle}, min_dist={min_dist}, cell_size={cell_size}, grid={grid_side}x{grid_side}"
    )

    fits = Point.is_in_circle if fill_circle else Point.is_in_rectangle

    first_point = _generate_first_point(prng, fits, max_seed_attempts)
    process_list = [first_point]
    sample_points = [first_point]
    grid.insert(first_point)

    next_report = PROGRESS_INTERVAL
    while process_list and len(sample_points) < num_points:
        point = pop_random(process_list, prng)

        for _ in range(new_points_per_sample):
            new_point = generate_random_point_around(point, min_dist, prng)
            if fits(new_point) and not grid.is_in_neighbourhood(new_point, min_dist, cell_size):
                process_list.append(new_point)
                sample_points.append(new_point)
                grid.insert(new_point)

        if len(sample_points) >= next_report:
            logger.debug(f"[generate_poisson_points] {len(sample_points)}/{num_points} samples")
            next_report = (len(sample_points) // PROGRESS_INTERVAL + 1) * PROGRESS_INTERVAL

    logger.debug(f"[generate_poisson_points] generated {len(sample_points)} samples")
    return sample_points
