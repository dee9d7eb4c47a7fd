"""
Command-line interface.

Usage:
    $ python -m circleintersections X1 Y1 X2 Y2 R1 [R2] [--single] [--eps E] [-v]
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from circleintersections.config import TOLERANCE
from circleintersections.logging_config import setup_logging
from circleintersections.model.geometry_utils import (
    circle_intersections, circle_intersections_single
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="circleintersections",
        description="Print the intersection points of two circles, one 'x y' pair per line.",
    )
    parser.add_argument("x1", type=float, help="X coordinate of the first center")
    parser.add_argument("y1", type=float, help="Y coordinate of the first center")
    parser.add_argument("x2", type=float, help="X coordinate of the second center")
    parser.add_argument("y2", type=float, help="Y coordinate of the second center")
    parser.add_argument("r1", type=float, help="Radius of the first circle")
    parser.add_argument("r2", type=float, nargs="?", default=None,
                        help="Radius of the second circle (defaults to r1)")
    parser.add_argument("--single", action="store_true",
                        help="Round results to single precision")
    parser.add_argument("--eps", type=float, default=TOLERANCE,
                        help=f"Tangency tolerance (default: {TOLERANCE})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    compute = circle_intersections_single if args.single else circle_intersections
    try:
        points = compute((args.x1, args.y1), (args.x2, args.y2), args.r1, args.r2, eps=args.eps)
    except ValueError as e:
        logger.debug("Intersection failed", exc_info=True)
        parser.exit(2, f"{parser.prog}: error: {e}\n")

    if not points:
        print("no intersection")
    for point in points:
        print(f"{point.x!r} {point.y!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
