"""Grayscale density maps used to thin point sets when rasterizing."""
import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

from .point_gen import Point, RandomSource

logger = logging.getLogger(__name__)


class DensityMap:
    """2D scalar field in [0, 1], indexed as ``values[row, column]``."""

    def __init__(self, values: np.ndarray):
        values = np.asarray(values, dtype=float)
        if values.ndim != 2 or values.size == 0:
            raise ValueError(f"density map must be a non-empty 2D array, got shape {values.shape}")
        if values.min() < 0.0 or values.max() > 1.0:
            raise ValueError("density map values must lie within [0, 1]")
        self.values = values

    @property
    def width(self) -> int:
        return self.values.shape[1]

    @property
    def height(self) -> int:
        return self.values.shape[0]

    def value_at(self, point: Point) -> float:
        x = min(max(int(point.x * self.width), 0), self.width - 1)
        y = min(max(int(point.y * self.height), 0), self.height - 1)
        return float(self.values[y, x])

    def accepts(self, point: Point, prng: RandomSource) -> bool:
        """Keep ``point`` with probability equal to the density under it."""
        return prng.random_float() <= self.value_at(point)


def load_density_map(path: Union[str, Path], expected_size: Optional[int] = None) -> DensityMap:
    """Read an image as an 8-bit grayscale density map normalised to [0, 1].

    The bottom row of the image becomes ``y == 0``, matching :func:`encode_bmp`.
    """
    logger.info(f"Loading density map {path}")
    with Image.open(path) as img:
        gray = np.asarray(img.convert("L"), dtype=np.float32) / 255.0
    # image rows run top to bottom, field rows run from y == 0 upwards
    gray = np.flipud(gray)
    height, width = gray.shape
    logger.info(f"Loaded ({width} x {height}) density map")
    if expected_size is not None and (width != expected_size or height != expected_size):
        raise ValueError(
            f"density map should be {expected_size} x {expected_size}, got {width} x {height}"
        )
    return DensityMap(gray)
