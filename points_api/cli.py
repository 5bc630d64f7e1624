"""Command-line front end: generate points, write a BMP preview and a text dump."""
import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from points_api.constants import DEFAULT_NUM_POINTS, IMAGE_SIZE, JITTER_FRACTION, NEW_POINTS_PER_SAMPLE
from points_api.services.density_map import load_density_map
from points_api.services.generation import METHODS, generate_distribution, resolve_generation_spec
from points_api.services.point_gen import DefaultPRNG, SamplingError
from points_api.services.rasterizer import rasterize_points, save_bmp
from points_api.services.text_dump import dump_points_text

logger = logging.getLogger(__name__)

VERSION = "1.2.0"


def print_banner() -> None:
    print("Poisson disk points generator")
    print(f"Version {VERSION}")
    print()
    print("Usage: poisson-points [density-map.bmp] [options]")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poisson-points",
        description="Generate 2D point distributions in the unit square or its inscribed disk.",
    )
    parser.add_argument("density_map", nargs="?", help="grayscale image thinning the rasterized points")
    parser.add_argument("--method", choices=METHODS, default="poisson")
    parser.add_argument("-n", "--num-points", type=int, default=DEFAULT_NUM_POINTS)
    parser.add_argument("--square", action="store_true", help="fill the unit square instead of the disk")
    parser.add_argument("--min-dist", type=float, default=-1.0, help="negative selects the default estimate")
    parser.add_argument("-k", "--new-points", type=int, default=NEW_POINTS_PER_SAMPLE,
                        help="candidates tried around each active sample")
    parser.add_argument("--jitter", type=float, default=JITTER_FRACTION)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--shuffle", action="store_true")
    parser.add_argument("--image-size", type=int, default=IMAGE_SIZE)
    parser.add_argument("--output-image", default="Poisson.bmp")
    parser.add_argument("--output-text", default="Poisson.txt")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    level_name = os.getenv("POINTS_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    print_banner()
    args = build_parser().parse_args(argv)

    try:
        density = None
        if args.density_map:
            density = load_density_map(args.density_map, expected_size=args.image_size)

        prng = DefaultPRNG(args.seed)
        spec = resolve_generation_spec(
            method=args.method,
            num_points=args.num_points,
            seed=args.seed,
            fill_circle=not args.square,
            min_dist=args.min_dist,
            new_points_per_sample=args.new_points,
            jitter=args.jitter,
            shuffle=args.shuffle,
        )
        points = generate_distribution(spec, prng)
        img = rasterize_points(points, image_size=args.image_size, density_map=density, prng=prng)
    except (ValueError, SamplingError) as exc:
        logger.error(f"ERROR: {exc}")
        return 255

    save_bmp(args.output_image, img)
    dump_points_text(args.output_text, points)
    return 0


if __name__ == "__main__":
    sys.exit(main())
