from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from planar.geometry.scalar import check_tolerance, random_between
from planar.geometry.vec2 import Vector2D


@dataclass
class Point2D:
    """A location in the plane. All point arithmetic goes through Vector2D."""

    x: float
    y: float

    __array_ufunc__ = None

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    @classmethod
    def zero(cls) -> "Point2D":
        return cls(0.0, 0.0)

    @classmethod
    def random(cls, a: float, b: float, rng: Optional[np.random.Generator] = None) -> "Point2D":
        return cls(random_between(a, b, rng), random_between(a, b, rng))

    def copy(self) -> "Point2D":
        return Point2D(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def is_nearly_equal(self, other: "Point2D", tolerance: Optional[float] = None) -> bool:
        tol = check_tolerance(tolerance)
        if tol == 0:
            return self == other
        return self.distance_squared(other) <= tol * tol

    def is_nearly_zero(self, tolerance: Optional[float] = None) -> bool:
        return self.is_nearly_equal(Point2D.zero(), tolerance)

    def distance(self, other: "Point2D") -> float:
        return self.vector_to(other).magnitude()

    def distance_squared(self, other: "Point2D") -> float:
        return self.vector_to(other).magnitude_squared()

    def manhattan_distance(self, other: "Point2D") -> float:
        return self.vector_to(other).manhattan_magnitude()

    def vector_to(self, other: "Point2D") -> Vector2D:
        return Vector2D(other.x - self.x, other.y - self.y)

    def vector_from(self, other: "Point2D") -> Vector2D:
        return other.vector_to(self)

    @staticmethod
    def vector_between(p1: "Point2D", p2: "Point2D") -> Vector2D:
        """Vector from p1 to p2."""
        return p1.vector_to(p2)

    def __add__(self, v: Vector2D) -> "Point2D":
        if not isinstance(v, Vector2D):
            return NotImplemented
        return Point2D(self.x + v.dx, self.y + v.dy)

    def __sub__(self, o):
        # point - point is the vector from `o` to `self`
        if isinstance(o, Point2D):
            return o.vector_to(self)
        if isinstance(o, Vector2D):
            return Point2D(self.x - o.dx, self.y - o.dy)
        return NotImplemented

    def __iadd__(self, v: Vector2D) -> "Point2D":
        if not isinstance(v, Vector2D):
            return NotImplemented
        self.x += v.dx
        self.y += v.dy
        return self

    def __isub__(self, v: Vector2D) -> "Point2D":
        if not isinstance(v, Vector2D):
            return NotImplemented
        self.x -= v.dx
        self.y -= v.dy
        return self
