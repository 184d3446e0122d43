from __future__ import annotations

import math
from typing import Optional

import numpy as np

from planar.geometry.errors import AllArgumentsAreZeroError, NegativeMagnitudeError, NegativeToleranceError
from planar.geometry.settings import default_rng, get_settings

PI_OVER_4 = math.pi / 4
PI_OVER_2 = math.pi / 2
THREE_PI_OVER_2 = 3 * PI_OVER_2
TWO_PI = 2 * math.pi

# Smallest double above 1.0; upper bound passed to Generator.uniform so that
# 1.0 itself is a possible draw.
_ONE_INCLUSIVE = float(np.nextafter(1.0, 2.0))


def resolve_tolerance(tolerance: Optional[float]) -> float:
    if tolerance is None:
        return get_settings().tolerance
    return float(tolerance)


def check_tolerance(tolerance: Optional[float]) -> float:
    tol = resolve_tolerance(tolerance)
    if tol < 0:
        raise NegativeToleranceError(tol)
    return tol


def check_magnitude(value: float) -> float:
    value = float(value)
    if value < 0:
        raise NegativeMagnitudeError(value)
    return value


def is_nearly_equal(a: float, b: float, tolerance: Optional[float] = None) -> bool:
    """Scalar counterpart of the vector/point predicates.

    A zero tolerance means exact equality; a negative one is an error.
    """
    tol = check_tolerance(tolerance)
    if tol == 0:
        return a == b
    return abs(a - b) <= tol


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180)


def radians_to_degrees(radians: float) -> float:
    return radians * (180 / math.pi)


def random01(rng: Optional[np.random.Generator] = None) -> float:
    """Uniform draw from the closed interval [0, 1]."""
    rng = rng if rng is not None else default_rng()
    return min(float(rng.uniform(0.0, _ONE_INCLUSIVE)), 1.0)


def random_between(a: float, b: float, rng: Optional[np.random.Generator] = None) -> float:
    """Uniform draw from the closed interval [min(a, b), max(a, b)]."""
    lo, hi = min(a, b), max(a, b)
    r = random01(rng)
    # weighted sum, since hi - lo can overflow for finite bounds
    return max(lo, min(lo * (1 - r) + hi * r, hi))


def random_nonzero(a: float, b: float, rng: Optional[np.random.Generator] = None) -> float:
    if a == 0 and b == 0:
        raise AllArgumentsAreZeroError()
    r = 0.0
    while r == 0:
        r = random_between(a, b, rng)
    return r
