"""Point distribution generators over the unit square and its inscribed disk."""
from .grid import Grid, unit_square_side
from .hammersley import generate_hammersley_points, radical_inverse_base2
from .jittered_grid import generate_jittered_grid_points, grid_dimensions
from .point import GridPoint, Point, get_distance, image_to_grid
from .poisson import (
    SamplingError,
    default_min_dist,
    generate_poisson_points,
    generate_random_point_around,
    pop_random,
)
from .prng import DefaultPRNG, RandomSource
from .shuffle import shuffle_points
from .vogel import GOLDEN_ANGLE, generate_vogel_points

__all__ = [
    "DefaultPRNG",
    "RandomSource",
    "Point",
    "GridPoint",
    "get_distance",
    "image_to_grid",
    "Grid",
    "unit_square_side",
    "SamplingError",
    "default_min_dist",
    "pop_random",
    "generate_random_point_around",
    "generate_poisson_points",
    "GOLDEN_ANGLE",
    "generate_vogel_points",
    "grid_dimensions",
    "generate_jittered_grid_points",
    "radical_inverse_base2",
    "generate_hammersley_points",
    "shuffle_points",
]
