import json
from pathlib import Path

_constants_path = Path(__file__).with_name("constants.json")
with _constants_path.open(encoding="utf-8") as f:
    _cfg = json.load(f)

DEFAULT_NUM_POINTS: int = int(_cfg["DEFAULT_NUM_POINTS"])
MAX_NUM_POINTS: int = int(_cfg["MAX_NUM_POINTS"])
NEW_POINTS_PER_SAMPLE: int = int(_cfg["NEW_POINTS_PER_SAMPLE"])
NEIGHBOURHOOD_CELLS: int = int(_cfg["NEIGHBOURHOOD_CELLS"])
MAX_SEED_ATTEMPTS: int = int(_cfg["MAX_SEED_ATTEMPTS"])
MAX_GRID_CELLS: int = int(_cfg["MAX_GRID_CELLS"])
JITTER_FRACTION: float = float(_cfg["JITTER_FRACTION"])
IMAGE_SIZE: int = int(_cfg["IMAGE_SIZE"])
PROGRESS_INTERVAL: int = int(_cfg["PROGRESS_INTERVAL"])
