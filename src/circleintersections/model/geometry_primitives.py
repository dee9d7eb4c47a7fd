"""
Geometric Primitives for intersection calculations.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence, Union, TYPE_CHECKING
import numpy as np
import math

from circleintersections.config import TOLERANCE

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A vector in 2D space representing direction and magnitude.
    """
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def perpendicular(self) -> Vector:
        """Rotate vector by +90 degrees."""
        return Vector(-self.y, self.x)


@dataclass(frozen=True)
class Point:
    """A simple geometric point in the XY plane."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_close(self, other: Point, eps: float = TOLERANCE) -> bool:
        return self.distance_to(other) <= eps

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    def as_single_precision(self) -> Point:
        """Round both coordinates to the nearest single-precision float."""
        x, y = np.array([self.x, self.y], dtype=np.float32)
        return Point(float(x), float(y))


PointLike = Union[Point, Sequence[float], "npt.NDArray[np.floating]"]


def as_point(value: PointLike) -> Point:
    """
    Convert any (x, y) representation into a double-precision Point.

    Args:
        value: A Point, a length-2 sequence or a numpy array of shape (2,).

    Returns:
        The equivalent Point. A Point is returned unchanged.

    Raises:
        TypeError: If the value cannot be read as a pair of numbers.
        ValueError: If the value does not hold exactly two finite coordinates.
    """
    if isinstance(value, Point):
        point = value
    elif value is None or isinstance(value, (str, bytes)):
        raise TypeError(f"Cannot interpret {value!r} as a point.")
    else:
        try:
            arr = np.asarray(value, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise TypeError(f"Cannot interpret {value!r} as a point.") from e
        if arr.shape != (2,):
            raise ValueError(f"Expected shape (2,), got {arr.shape}.")
        point = Point(float(arr[0]), float(arr[1]))
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise ValueError(f"Point coordinates must be finite, got ({point.x}, {point.y}).")
    return point


@dataclass(frozen=True)
class Circle:
    """
    Mathematical helper for intersection calculations.

    The center is coerced to a Point. The radius must be finite and non-negative.
    """
    center: Point
    radius: float

    def __post_init__(self):
        object.__setattr__(self, 'center', as_point(self.center))
        object.__setattr__(self, 'radius', validate_radius(self.radius))

    def on_boundary(self, point: Point, eps: float = TOLERANCE) -> bool:
        return abs(self.center.distance_to(point) - self.radius) <= eps

    def intersections(self, other: Circle, *, eps: float = TOLERANCE) -> list[Point]:
        from circleintersections.model.geometry_utils import circle_circle_intersection
        return circle_circle_intersection(self, other, eps=eps)


def validate_radius(radius: float, name: str = "radius") -> float:
    """Return the radius as a float, raising ValueError if it is negative or not finite."""
    value = float(radius)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {radius!r}.")
    if value < 0.0:
        raise ValueError(f"{name} must be non-negative, got {radius!r}.")
    return value
