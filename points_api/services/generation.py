from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from points_api.constants import DEFAULT_NUM_POINTS, JITTER_FRACTION, NEW_POINTS_PER_SAMPLE
from .point_gen import (
    DefaultPRNG,
    Point,
    RandomSource,
    generate_hammersley_points,
    generate_jittered_grid_points,
    generate_poisson_points,
    generate_vogel_points,
    shuffle_points,
)

logger = logging.getLogger(__name__)

METHODS = ("poisson", "vogel", "jittered", "hammersley")


def resolve_generation_spec(
    method: Optional[str] = None,
    num_points: Optional[int] = None,
    seed: Optional[int] = None,
    fill_circle: bool = True,
    min_dist: Optional[float] = None,
    new_points_per_sample: Optional[int] = None,
    jitter: Optional[float] = None,
    shuffle: bool = False,
) -> Dict[str, Any]:
    """Normalize point generation parameters.

    Parameters
    ----------
    method:
        One of :data:`METHODS`. Defaults to ``"poisson"``.
    num_points:
        Target number of points, :data:`DEFAULT_NUM_POINTS` when omitted.
    seed:
        PRNG seed. ``None`` draws a fresh, non-reproducible sequence.
    fill_circle:
        Clip to the disk inscribed in the unit square. Ignored by ``vogel``
        (always a disk) and ``hammersley`` (always the square).
    min_dist:
        Poisson-disk minimal distance; ``None`` or a negative value selects the
        estimate derived from ``num_points``.
    new_points_per_sample, jitter:
        Poisson-disk ``k`` and jittered-grid amplitude.
    shuffle:
        Randomly permute the generated points.
    """
    method = (method or "poisson").lower()
    if method not in METHODS:
        raise ValueError(f"unknown method {method!r}, expected one of {', '.join(METHODS)}")

    spec = {
        "method": method,
        "num_points": DEFAULT_NUM_POINTS if num_points is None else int(num_points),
        "seed": seed,
        "fill_circle": bool(fill_circle),
        "min_dist": -1.0 if min_dist is None else float(min_dist),
        "new_points_per_sample": NEW_POINTS_PER_SAMPLE if new_points_per_sample is None else int(new_points_per_sample),
        "jitter": JITTER_FRACTION if jitter is None else float(jitter),
        "shuffle": bool(shuffle),
    }
    logger.debug(f"[resolve_generation_spec] {spec}")
    return spec


def generate_distribution(spec: Dict[str, Any], prng: Optional[RandomSource] = None) -> List[Point]:
    """Run the generator selected by a spec from :func:`resolve_generation_spec`."""
    if prng is None:
        prng = DefaultPRNG(spec.get("seed"))

    method = spec["method"]
    if method == "poisson":
        points = generate_poisson_points(
            spec["num_points"],
            prng,
            new_points_per_sample=spec["new_points_per_sample"],
            fill_circle=spec["fill_circle"],
            min_dist=spec["min_dist"],
        )
    elif method == "vogel":
        points = generate_vogel_points(spec["num_points"])
    elif method == "jittered":
        points = generate_jittered_grid_points(
            spec["num_points"], prng, fill_circle=spec["fill_circle"], jitter=spec["jitter"]
        )
    elif method == "hammersley":
        points = generate_hammersley_points(spec["num_points"])
    else:
        raise ValueError(f"unknown method {method!r}")

    if spec.get("shuffle"):
        shuffle_points(points, prng)
    logger.info(f"Generated {len(points)} points with method={method}")
    return points
