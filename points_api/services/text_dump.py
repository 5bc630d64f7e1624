import logging
from pathlib import Path
from typing import Sequence, Union

from .point_gen import Point

logger = logging.getLogger(__name__)


def format_points_text(points: Sequence[Point]) -> str:
    lines = [f"NumPoints = {len(points)}"]
    lines.extend(f"X = {p.x:g}; Y = {p.y:g}" for p in points)
    return "\n".join(lines) + "\n"


def dump_points_text(path: Union[str, Path], points: Sequence[Point]) -> None:
    Path(path).write_text(format_points_text(points), encoding="utf-8")
    logger.info(f"Saved {path}")
