from __future__ import annotations

import logging
from math import sqrt
from typing import Optional

from circleintersections.config import TOLERANCE
from circleintersections.model.geometry_primitives import (
    Circle, Point, PointLike, as_point, validate_radius
)

logger = logging.getLogger(__name__)


class CoincidentCirclesError(ValueError):
    """Raised when both circles share center and radius, so the intersection is the whole circle."""


def circle_intersections(
    center1: PointLike,
    center2: PointLike,
    radius1: float,
    radius2: Optional[float] = None,
    *,
    eps: float = TOLERANCE
    ) -> list[Point]:
    """
    Compute the intersection point(s) of two circles in the XY plane.

    Args:
        center1: Center (x, y) of the first circle.
        center2: Center (x, y) of the second circle.
        radius1: Radius of the first circle (must be non-negative).
        radius2: Radius of the second circle. If None, assumed equal to `radius1`.
        eps: Relative tolerance for tangency and coincidence tests. Distances are
             compared against `eps * max(1, r1 + r2)`. Default is `config.TOLERANCE`.

    Returns:
        A list containing 0, 1, or 2 intersection points. For two points the order is
        always F + G, then F - G (see Notes).

    Raises:
        ValueError: If a radius is negative or not finite, or a center is not finite.
        CoincidentCirclesError: If both circles have the same center and the same
            positive radius within tolerance (infinitely many intersections).

    Notes:
        With d the center distance, the chord midpoint is
          F = (C1 + C2) / 2 + a (C2 - C1),   a = (r1^2 - r2^2) / (2 d^2)
        and the half-chord offset is
          G = c/2 * perp(C1 - C2),
          c^2 = 2 (r1^2 + r2^2) / d^2 - (r1^2 - r2^2)^2 / d^4 - 1
        The radicand c^2 is clamped at zero so rounding at tangency cannot produce NaN.

        When d is within tolerance of r1 + r2 (external) or |r1 - r2| (internal) the
        circles are tangent: the single point lies at distance r1 from C1 on the
        center axis. The no-intersection range is widened by the same tolerance.
    """
    r1 = validate_radius(radius1, "radius1")
    r2 = r1 if radius2 is None else validate_radius(radius2, "radius2")
    c1, c2 = as_point(center1), as_point(center2)

    d = c1.distance_to(c2)
    tol = eps * max(1.0, r1 + r2)

    if d <= tol and abs(r1 - r2) <= tol:
        if r1 + r2 <= tol:
            # Both circles have collapsed onto the same point
            return [Point((c1.x + c2.x) / 2.0, (c1.y + c2.y) / 2.0)]
        raise CoincidentCirclesError(
            f"Circles centered at ({c1.x}, {c1.y}) with radius {r1} are coincident."
        )

    # No intersection: too far apart, or one circle strictly inside the other
    if d > r1 + r2 + tol or d < abs(r1 - r2) - tol or d == 0.0:
        logger.debug(f"No intersection: d={d}, r1={r1}, r2={r2}")
        return []

    external = abs(d - (r1 + r2)) <= tol
    internal = abs(d - abs(r1 - r2)) <= tol
    if external or internal:
        # Circle 1 inside circle 2 touches on the side facing away from C2
        side = -1.0 if internal and not external and r2 > r1 else 1.0
        f = c1 + (c2 - c1) / d * (side * r1)
        logger.debug(f"Tangent circles, single intersection at ({f.x}, {f.y})")
        return [f]

    dsq = d * d
    r1sq, r2sq = r1 * r1, r2 * r2
    r1sq_r2sq = r1sq - r2sq
    a = r1sq_r2sq / (2.0 * dsq)
    csq = 2.0 * (r1sq + r2sq) / dsq - (r1sq_r2sq * r1sq_r2sq) / (dsq * dsq) - 1.0
    c = sqrt(max(0.0, csq))

    f = Point((c1.x + c2.x) / 2.0 + a * (c2.x - c1.x), (c1.y + c2.y) / 2.0 + a * (c2.y - c1.y))
    g = (c / 2.0) * (c1 - c2).perpendicular()

    if g.magnitude <= tol:
        logger.debug(f"Nearly tangent circles, single intersection at ({f.x}, {f.y})")
        return [f]

    return [f + g, f - g]


def circle_circle_intersection(
    circle1: Circle,
    circle2: Circle,
    *,
    eps: float = TOLERANCE
    ) -> list[Point]:
    """
    Compute intersection point(s) between two Circle primitives.

    See `circle_intersections` for the ordering, tangency and error rules.
    """
    return circle_intersections(
        circle1.center, circle2.center, circle1.radius, circle2.radius, eps=eps
    )


def circle_intersections_single(
    center1: PointLike,
    center2: PointLike,
    radius1: float,
    radius2: Optional[float] = None,
    *,
    eps: float = TOLERANCE
    ) -> list[Point]:
    """
    Single-precision variant of `circle_intersections`.

    The calculation runs in double precision; only the returned coordinates are
    rounded to the nearest float32 value. Two points that become equal after
    rounding are reported once.
    """
    points = [
        p.as_single_precision()
        for p in circle_intersections(center1, center2, radius1, radius2, eps=eps)
    ]
    if len(points) == 2 and points[0] == points[1]:
        return points[:1]
    return points
