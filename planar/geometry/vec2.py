from __future__ import annotations

from dataclasses import dataclass
import math
import numbers
from typing import Iterator, Optional

import numpy as np

from planar.geometry.errors import DivisionByZeroError, NotNormalizableError
from planar.geometry.scalar import TWO_PI, check_magnitude, check_tolerance, random_between


@dataclass
class Vector2D:
    """A displacement in the plane.

    Vectors are plain mutable values: normalize/scale/rotate and the
    compound operators change the receiver, everything else returns a new
    vector.
    """

    dx: float
    dy: float

    # Make numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        self.dx = float(self.dx)
        self.dy = float(self.dy)

    @classmethod
    def zero(cls) -> "Vector2D":
        return cls(0.0, 0.0)

    @classmethod
    def unit_x(cls) -> "Vector2D":
        return cls(1.0, 0.0)

    @classmethod
    def unit_y(cls) -> "Vector2D":
        return cls(0.0, 1.0)

    @classmethod
    def from_polar(cls, magnitude: float, angle: float) -> "Vector2D":
        """Vector of the given magnitude at `angle` radians counter-clockwise from +X."""
        m = check_magnitude(magnitude)
        return cls(m * math.cos(angle), m * math.sin(angle))

    @classmethod
    def from_magnitude_sine_cosine(cls, magnitude: float, sine: float, cosine: float) -> "Vector2D":
        m = check_magnitude(magnitude)
        return cls(m * cosine, m * sine)

    @classmethod
    def between(cls, p1, p2) -> "Vector2D":
        """Vector pointing from point p1 to point p2."""
        return cls(p2.x - p1.x, p2.y - p1.y)

    @classmethod
    def random(cls, a: float, b: float, rng: Optional[np.random.Generator] = None) -> "Vector2D":
        return cls(random_between(a, b, rng), random_between(a, b, rng))

    def copy(self) -> "Vector2D":
        return Vector2D(self.dx, self.dy)

    def __iter__(self) -> Iterator[float]:
        yield self.dx
        yield self.dy

    def __hash__(self) -> int:
        return hash((self.dx, self.dy))

    # Comparison

    def is_nearly_equal(self, other: "Vector2D", tolerance: Optional[float] = None) -> bool:
        """Whether |self - other| is within `tolerance`.

        The test is on the Euclidean length of the difference, not on each
        component. A tolerance of exactly 0 falls back to `==`.
        """
        tol = check_tolerance(tolerance)
        if tol == 0:
            return self == other
        return (self - other).magnitude_squared() <= tol * tol

    def is_nearly_zero(self, tolerance: Optional[float] = None) -> bool:
        return self.is_nearly_equal(Vector2D.zero(), tolerance)

    # Magnitude

    def magnitude(self) -> float:
        return math.hypot(self.dx, self.dy)

    def magnitude_squared(self) -> float:
        return self.dx * self.dx + self.dy * self.dy

    def manhattan_magnitude(self) -> float:
        return abs(self.dx) + abs(self.dy)

    def is_normalizable(self) -> bool:
        return self.dx != 0 or self.dy != 0

    def normalize(self) -> None:
        if not self.is_normalizable():
            raise NotNormalizableError()
        m = self.magnitude()
        self.dx /= m
        self.dy /= m

    def normalized(self) -> Optional["Vector2D"]:
        if not self.is_normalizable():
            return None
        v = self.copy()
        v.normalize()
        return v

    def scale_magnitude(self, value: float) -> None:
        """Rescale to magnitude |value|; a negative value also reverses direction."""
        value = float(value)
        self.normalize()
        self *= value

    def magnitude_scaled(self, value: float) -> Optional["Vector2D"]:
        if not self.is_normalizable():
            return None
        v = self.copy()
        v.scale_magnitude(value)
        return v

    def scale_magnitude_down_to_if_larger(self, max_value: float) -> None:
        max_value = check_magnitude(max_value)
        if max_value == 0:
            self.dx = 0.0
            self.dy = 0.0
            return
        m = self.magnitude()
        if m > max_value:
            self.scale_magnitude(max_value)

    def magnitude_scaled_down_to_if_larger(self, max_value: float) -> "Vector2D":
        v = self.copy()
        v.scale_magnitude_down_to_if_larger(max_value)
        return v

    def scale_magnitude_up_to_if_smaller(self, min_value: float) -> None:
        """Grow to `min_value` if shorter. A zero minimum enforces nothing."""
        min_value = check_magnitude(min_value)
        if min_value == 0:
            return
        if not self.is_normalizable():
            raise NotNormalizableError()
        m = self.magnitude()
        if m < min_value:
            self.scale_magnitude(min_value)

    def magnitude_scaled_up_to_if_smaller(self, min_value: float) -> "Vector2D":
        v = self.copy()
        v.scale_magnitude_up_to_if_smaller(min_value)
        return v

    # Products and angles

    def dot(self, o: "Vector2D") -> float:
        return self.dx * o.dx + self.dy * o.dy

    def cross(self, o: "Vector2D") -> float:
        """z-component of the 3D cross product, i.e. the signed parallelogram area."""
        return self.dx * o.dy - self.dy * o.dx

    def angle_from_x_axis(self) -> float:
        """Argument in [0, 2*pi). The zero vector has angle 0."""
        if not self.is_normalizable():
            return 0.0
        a = math.fmod(math.atan2(self.dy, self.dx), TWO_PI)
        if a < 0:
            a += TWO_PI
        if a >= TWO_PI:
            a = 0.0
        return a

    def sin_angle_from_x_axis(self) -> float:
        if not self.is_normalizable():
            return 0.0
        return self.dy / self.magnitude()

    def cos_angle_from_x_axis(self) -> float:
        # 1 for the zero vector so that (cos, sin) matches angle 0
        if not self.is_normalizable():
            return 1.0
        return self.dx / self.magnitude()

    def tan_angle_from_x_axis(self) -> float:
        if not self.is_normalizable():
            return 0.0
        if self.dx == 0:
            return math.inf if self.dy > 0 else -math.inf
        return self.dy / self.dx

    def smallest_angle(self, other: "Vector2D") -> float:
        """Unsigned angle between the two vectors, in [0, pi]."""
        delta = abs(self.angle_from_x_axis() - other.angle_from_x_axis())
        if delta > math.pi:
            return TWO_PI - delta
        return delta

    # Projections

    def projection_parallel(self, other: "Vector2D") -> "Vector2D":
        # The zero vector counts as parallel to everything.
        if not self.is_normalizable() or not other.is_normalizable():
            return self.copy()
        return (self.dot(other) / other.magnitude_squared()) * other

    def projection_perpendicular(self, other: "Vector2D") -> "Vector2D":
        if not self.is_normalizable() or not other.is_normalizable():
            return self.copy()
        return self - self.projection_parallel(other)

    def is_nearly_parallel(self, other: "Vector2D", tolerance: Optional[float] = None) -> bool:
        tol = check_tolerance(tolerance)
        return abs(self.cross(other)) <= tol

    def is_nearly_perpendicular(self, other: "Vector2D", tolerance: Optional[float] = None) -> bool:
        tol = check_tolerance(tolerance)
        return abs(self.dot(other)) <= tol

    # Rotation

    def rotate_counter_clockwise_by_sine_cosine(self, sine: float, cosine: float) -> None:
        tx = self.dx * cosine - self.dy * sine
        ty = self.dy * cosine + self.dx * sine
        self.dx = tx
        self.dy = ty

    def rotated_counter_clockwise_by_sine_cosine(self, sine: float, cosine: float) -> "Vector2D":
        v = self.copy()
        v.rotate_counter_clockwise_by_sine_cosine(sine, cosine)
        return v

    def rotate_counter_clockwise(self, angle: float) -> None:
        self.rotate_counter_clockwise_by_sine_cosine(math.sin(angle), math.cos(angle))

    def rotated_counter_clockwise(self, angle: float) -> "Vector2D":
        v = self.copy()
        v.rotate_counter_clockwise(angle)
        return v

    def rotate_clockwise_by_sine_cosine(self, sine: float, cosine: float) -> None:
        """Takes the sine and cosine of the clockwise angle theta, i.e. rotates by -theta."""
        self.rotate_counter_clockwise_by_sine_cosine(-sine, cosine)

    def rotated_clockwise_by_sine_cosine(self, sine: float, cosine: float) -> "Vector2D":
        v = self.copy()
        v.rotate_clockwise_by_sine_cosine(sine, cosine)
        return v

    def rotate_clockwise(self, angle: float) -> None:
        self.rotate_clockwise_by_sine_cosine(math.sin(angle), math.cos(angle))

    def rotated_clockwise(self, angle: float) -> "Vector2D":
        v = self.copy()
        v.rotate_clockwise(angle)
        return v

    # Arithmetic

    def __add__(self, o: "Vector2D") -> "Vector2D":
        if not isinstance(o, Vector2D):
            return NotImplemented
        return Vector2D(self.dx + o.dx, self.dy + o.dy)

    def __sub__(self, o: "Vector2D") -> "Vector2D":
        if not isinstance(o, Vector2D):
            return NotImplemented
        return Vector2D(self.dx - o.dx, self.dy - o.dy)

    def __mul__(self, s: float) -> "Vector2D":
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return Vector2D(self.dx * s, self.dy * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> "Vector2D":
        if not isinstance(s, numbers.Real):
            return NotImplemented
        if s == 0:
            raise DivisionByZeroError()
        return Vector2D(self.dx / s, self.dy / s)

    def __neg__(self) -> "Vector2D":
        return -1.0 * self

    def __iadd__(self, o: "Vector2D") -> "Vector2D":
        if not isinstance(o, Vector2D):
            return NotImplemented
        self.dx += o.dx
        self.dy += o.dy
        return self

    def __isub__(self, o: "Vector2D") -> "Vector2D":
        if not isinstance(o, Vector2D):
            return NotImplemented
        self.dx -= o.dx
        self.dy -= o.dy
        return self

    def __imul__(self, s: float) -> "Vector2D":
        if not isinstance(s, numbers.Real):
            return NotImplemented
        self.dx *= s
        self.dy *= s
        return self

    def __itruediv__(self, s: float) -> "Vector2D":
        if not isinstance(s, numbers.Real):
            return NotImplemented
        if s == 0:
            raise DivisionByZeroError()
        self.dx /= s
        self.dy /= s
        return self
