import os
import logging
import uuid
from typing import Any, Dict, List, Literal, Optional

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL_NAME = os.getenv("POINTS_LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s"
)

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel, Field

from points_api.constants import (
    DEFAULT_NUM_POINTS,
    IMAGE_SIZE,
    JITTER_FRACTION,
    MAX_NUM_POINTS,
    NEW_POINTS_PER_SAMPLE,
)
from points_api.services.generation import generate_distribution, resolve_generation_spec
from points_api.services.point_gen import Point, SamplingError
from points_api.services.rasterizer import encode_bmp, rasterize_points
from points_api.services.text_dump import format_points_text

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("POINTS_CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

# in-memory distribution storage: distribution_id -> record
distributions: dict[str, dict] = {}

app = FastAPI(title="Point Distribution API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class GenerationRequest(BaseModel):
    method: Literal["poisson", "vogel", "jittered", "hammersley"] = "poisson"
    num_points: int = Field(DEFAULT_NUM_POINTS, gt=0, le=MAX_NUM_POINTS)
    seed: Optional[int] = Field(None, ge=0)
    fill_circle: bool = True
    min_dist: float = -1.0
    new_points_per_sample: int = Field(NEW_POINTS_PER_SAMPLE, gt=0)
    jitter: float = Field(JITTER_FRACTION, ge=0.0, le=1.0)
    shuffle: bool = False


def _get_distribution(distribution_id: str) -> Dict[str, Any]:
    record = distributions.get(distribution_id)
    if not record:
        raise HTTPException(status_code=404, detail="Distribution not found")
    return record


def _record_points(record: Dict[str, Any]) -> List[Point]:
    return [Point(x, y) for x, y in record["points"]]


@app.post("/distributions", response_model=dict)
def create_distribution(req: GenerationRequest):
    try:
        spec = resolve_generation_spec(**req.model_dump())
        points = generate_distribution(spec)
    except SamplingError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    distribution_id = str(uuid.uuid4())
    record = {
        "id": distribution_id,
        "method": spec["method"],
        "num_points": len(points),
        "points": [[p.x, p.y] for p in points],
        "params": spec,
    }
    distributions[distribution_id] = record
    logging.debug(f"Stored distribution {distribution_id} ({len(points)} points)")
    return record


@app.get("/distributions/{distribution_id}", response_model=dict)
def get_distribution(distribution_id: str):
    return _get_distribution(distribution_id)


@app.get("/distributions/{distribution_id}/image")
def get_distribution_image(
    distribution_id: str,
    image_size: int = Query(IMAGE_SIZE, gt=0, le=8192),
):
    record = _get_distribution(distribution_id)
    img = rasterize_points(_record_points(record), image_size=image_size)
    return Response(content=encode_bmp(img), media_type="image/bmp")


@app.get("/distributions/{distribution_id}/text", response_class=PlainTextResponse)
def get_distribution_text(distribution_id: str):
    record = _get_distribution(distribution_id)
    return PlainTextResponse(format_points_text(_record_points(record)))
