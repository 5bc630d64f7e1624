from typing import List

from .point import Point


def radical_inverse_base2(i: int) -> float:
    """Mirror the 32-bit binary digits of ``i`` around the radix point."""
    bits = i & 0xFFFFFFFF
    bits = ((bits << 16) | (bits >> 16)) & 0xFFFFFFFF
    bits = ((bits & 0x55555555) << 1) | ((bits & 0xAAAAAAAA) >> 1)
    bits = ((bits & 0x33333333) << 2) | ((bits & 0xCCCCCCCC) >> 2)
    bits = ((bits & 0x0F0F0F0F) << 4) | ((bits & 0xF0F0F0F0) >> 4)
    bits = ((bits & 0x00FF00FF) << 8) | ((bits & 0xFF00FF00) >> 8)
    return float(bits) / 4294967296.0


def generate_hammersley_points(num_points: int) -> List[Point]:
    """Base-2 Hammersley set over the whole unit square.

    No disk variant: callers that need one drop the points outside it.
    """
    if num_points <= 0:
        raise ValueError(f"num_points must be positive, got {num_points}")
    if num_points > 0xFFFFFFFF:
        raise ValueError(f"num_points must fit in 32 bits, got {num_points}")
    return [Point(i / num_points, radical_inverse_base2(i)) for i in range(num_points)]
