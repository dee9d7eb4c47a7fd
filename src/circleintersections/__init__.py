"""Intersection points of two circles."""
from circleintersections.logging_config import setup_logging
from circleintersections.model.geometry_primitives import Circle, Point, Vector, as_point
from circleintersections.model.geometry_utils import (
    CoincidentCirclesError,
    circle_circle_intersection,
    circle_intersections,
    circle_intersections_single,
)

__version__ = "0.1.0"

__all__ = [
    "Circle",
    "CoincidentCirclesError",
    "Point",
    "Vector",
    "as_point",
    "circle_circle_intersection",
    "circle_intersections",
    "circle_intersections_single",
    "setup_logging",
]
