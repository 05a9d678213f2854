"""Command line Body Fat Index calculator."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from .config import estimator_config, load_config, setup_logging
from .estimator import BodyFatEstimator, Measurements
from .exceptions import BodyFatIndexError
from .units import LENGTH_UNITS, WEIGHT_UNITS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Body Fat Index calculator")
    parser.add_argument(
        "--config",
        "-c",
        help="Path to YAML config file (units and logging)",
    )
    parser.add_argument("--weight-unit", type=str.lower, choices=WEIGHT_UNITS)
    parser.add_argument("--length-unit", type=str.lower, choices=LENGTH_UNITS)
    parser.add_argument("--sex", "-s", required=True, help="m/male or f/female")
    parser.add_argument("--weight", type=float, required=True)
    parser.add_argument("--waist", type=float, required=True)
    parser.add_argument("--wrist", type=float, help="Required for women")
    parser.add_argument("--hips", type=float, help="Required for women")
    parser.add_argument("--forearm", type=float, help="Required for women")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config: dict[str, Any] = {}
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            print("Copy config/config.yaml.example to config/config.yaml and edit it")
            return 1

    try:
        if args.config:
            config = load_config(args.config)
        setup_logging(config)
        estimator = BodyFatEstimator(
            estimator_config(config, args.weight_unit, args.length_unit)
        )
        result = estimator.compute(
            Measurements(
                sex=args.sex,
                weight=args.weight,
                waist=args.waist,
                wrist=args.wrist,
                hips=args.hips,
                forearm=args.forearm,
            )
        )
    except BodyFatIndexError as e:
        logger.error(f"Failed to calculate body fat index: {e}")
        return 1

    units = estimator.config
    logger.info("=== BODY FAT INDEX ===")
    logger.info(f"Units: {units.weight_unit}/{units.length_unit}")
    logger.info(f"Sex: {result.sex}")
    logger.info(f"Lean body weight: {result.lean_body_weight_lb:.1f} lb")
    logger.info(f"Body fat weight: {result.body_fat_weight_lb:.1f} lb")
    logger.info("======================")

    print(f"{result.formatted_index}% {result.category}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
