from typing import MutableSequence

from .prng import RandomSource


def shuffle_points(points: MutableSequence, prng: RandomSource) -> None:
    """Fisher-Yates shuffle of ``points`` in place."""
    for i in range(len(points) - 1, 0, -1):
        j = prng.random_int(i)
        points[i], points[j] = points[j], points[i]
