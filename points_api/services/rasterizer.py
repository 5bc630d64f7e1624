"""Rasterize point sets into RGB images and encode them as BMP."""
import io
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np
from PIL import Image

from points_api.constants import IMAGE_SIZE
from .density_map import DensityMap
from .point_gen import Point, RandomSource

logger = logging.getLogger(__name__)


def rasterize_points(
    points: Iterable[Point],
    image_size: int = IMAGE_SIZE,
    density_map: Optional[DensityMap] = None,
    prng: Optional[RandomSource] = None,
) -> np.ndarray:
    """Draw each point as a white pixel on a black ``image_size`` square.

    Row 0 of the returned array holds y == 0; :func:`encode_bmp` puts that
    row at the bottom of the image.

    With a ``density_map`` every point is first kept or dropped by
    :meth:`DensityMap.accepts`, which needs ``prng``.
    """
    if image_size <= 0:
        raise ValueError(f"image_size must be positive, got {image_size}")
    if density_map is not None and prng is None:
        raise ValueError("a prng is required to apply a density map")

    img = np.zeros((image_size, image_size, 3), dtype=np.uint8)
    drawn = 0
    for p in points:
        if density_map is not None and not density_map.accepts(p, prng):
            continue
        x = min(max(int(p.x * image_size), 0), image_size - 1)
        y = min(max(int(p.y * image_size), 0), image_size - 1)
        img[y, x] = 255
        drawn += 1
    logger.debug(f"[rasterize_points] drew {drawn} points on {image_size}x{image_size}")
    return img


def encode_bmp(image: np.ndarray) -> bytes:
    """Encode a raster whose row 0 is y == 0 as a BMP with y == 0 at the bottom."""
    buf = io.BytesIO()
    Image.fromarray(np.ascontiguousarray(np.flipud(image), dtype=np.uint8)).save(buf, format="BMP")
    return buf.getvalue()


def save_bmp(path: Union[str, Path], image: np.ndarray) -> None:
    Path(path).write_bytes(encode_bmp(image))
    logger.info(f"Saved {path}")
