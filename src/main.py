"""Command line entry point: decode a PGM file and print a summary of it."""

import argparse
import sys
from pathlib import Path

from loguru import logger
from returns.result import Failure, Success
from returns.unsafe import unsafe_perform_io

from parsers import load_pgm
from settings import get_settings


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode a binary (P5) PGM image")
    parser.add_argument("path", type=Path, help="PGM file to decode")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show log messages")
    return parser


def main(path: Path) -> int:
    """Decode the PGM file at `path` and print its dimensions, or the reason it could not be decoded."""
    match unsafe_perform_io(load_pgm(path)):
        case Success(image):
            print(
                f"{path}: {image.width}x{image.height}, "
                f"max grey value {image.max_grey_val}, {len(image.contents)} pixel bytes"
            )
            return 0
        case Failure(error):
            print(f"{path}: {error}", file=sys.stderr)
    return 1


def run() -> None:
    args = _build_parser().parse_args()
    logger.remove()
    if args.verbose:
        logger.add(sys.stderr, level="DEBUG")
        get_settings().log_startup_config()
    sys.exit(main(args.path))


if __name__ == "__main__":
    run()
