# main.py
"""Command line entry point: ``python main.py SCALE SEED``."""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog
import yaml

from maze.errors import ConfigurationError
from maze.image_io import default_filename, save_image
from maze.procgen import make_image, validate_parameters
from utils.config import load_settings
from utils.logging_utils import parse_level, setup_logging

log = structlog.get_logger()  # module-level logger


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Colour a random spanning tree of a toroidal grid along a Hilbert curve."
    )
    parser.add_argument("scale", type=int, help="Generation scale from 1 to 16; the image is scale**3 pixels square")
    parser.add_argument("seed", type=int, help="Random seed (unsigned 64-bit integer)")
    parser.add_argument("--output", type=Path, help="Output file (overrides the configured name)")
    parser.add_argument("--output-dir", type=Path, help="Directory for the generated image")
    parser.add_argument("--config", type=Path, help="YAML config file (default: config/config.yaml)")
    parser.add_argument("--log-level", help="Logging level (default from config)")
    return parser.parse_args(argv)


def resolve_output_path(args: argparse.Namespace, settings: dict) -> Path:
    if args.output is not None:
        return args.output
    output_dir = args.output_dir if args.output_dir is not None else Path(settings["output_dir"])
    return output_dir / default_filename(args.scale, args.seed, settings["filename_template"])


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        cli_level = parse_level(args.log_level) if args.log_level else None
        setup_logging(cli_level if cli_level is not None else logging.INFO)
        settings = load_settings(args.config)
        if cli_level is None:
            setup_logging(parse_level(settings["log_level"]))
    except (FileNotFoundError, yaml.YAMLError, ValueError) as e:
        log.error("Could not load configuration", config=str(args.config), error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        validate_parameters(args.scale, args.seed)
    except ConfigurationError as e:
        log.error("Invalid generation parameters", scale=args.scale, seed=args.seed, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    output_path = resolve_output_path(args, settings)
    log.info(f"Start {output_path.name}", scale=args.scale, seed=args.seed)
    pixels = make_image(args.scale, args.seed)
    save_image(pixels, output_path)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
