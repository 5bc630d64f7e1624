import math
from typing import List

from .point import Point

GOLDEN_ANGLE = math.pi * (3.0 - math.sqrt(5.0))


def generate_vogel_points(num_points: int) -> List[Point]:
    """Place ``num_points`` on a Vogel (sunflower) spiral inside the inscribed disk.

    The radius grows with the square root of the index so every point covers
    the same area, and consecutive points turn by the golden angle.
    """
    if num_points <= 0:
        raise ValueError(f"num_points must be positive, got {num_points}")

    points = []
    for i in range(num_points):
        r = math.sqrt((i + 0.5) / num_points)
        theta = i * GOLDEN_ANGLE
        points.append(Point(0.5 + 0.5 * r * math.cos(theta), 0.5 + 0.5 * r * math.sin(theta)))
    return points
