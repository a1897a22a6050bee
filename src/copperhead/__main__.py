from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .errors import InvalidConfiguration

logger = logging.getLogger("copperhead")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="copperhead", description="Arcade snake on a fixed grid.")
    parser.add_argument("--width", type=int, default=config.GRID_WIDTH, help="Grid width in cells.")
    parser.add_argument("--height", type=int, default=config.GRID_HEIGHT, help="Grid height in cells.")
    parser.add_argument("--tick-ms", type=int, default=config.TICK_MS, help="Milliseconds between snake moves.")
    parser.add_argument(
        "--start-length",
        type=int,
        default=config.START_LENGTH,
        help="Snake length at the start of each round.",
    )
    parser.add_argument("--cell-size", type=int, default=config.CELL_SIZE, help="Cell size in pixels.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging verbosity.",
    )
    return parser


def build_settings(args: argparse.Namespace) -> config.Settings:
    return config.Settings(
        width=args.width,
        height=args.height,
        tick_ms=args.tick_ms,
        start_length=args.start_length,
        cell_size=args.cell_size,
        seed=args.seed,
    ).validate()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = build_settings(args)
    except InvalidConfiguration as e:
        logger.error("invalid configuration: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    # Imported late so argument errors don't pay for SDL startup.
    from .game import run

    return run(settings)


if __name__ == "__main__":
    raise SystemExit(main())
