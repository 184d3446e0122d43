from __future__ import annotations


class GeometryError(Exception):
    """Base class for every error raised by planar.geometry."""


class NegativeToleranceError(GeometryError, ValueError):
    def __init__(self, tolerance: float):
        super().__init__(f"tolerance must be non-negative, got {tolerance}")
        self.tolerance = tolerance


class NegativeMagnitudeError(GeometryError, ValueError):
    def __init__(self, magnitude: float):
        super().__init__(f"magnitude must be non-negative, got {magnitude}")
        self.magnitude = magnitude


class NotNormalizableError(GeometryError, ValueError):
    def __init__(self):
        super().__init__("the zero vector has no direction and cannot be normalized")


class DivisionByZeroError(GeometryError, ZeroDivisionError):
    def __init__(self):
        super().__init__("cannot divide a vector by zero")


class AllArgumentsAreZeroError(GeometryError, ValueError):
    def __init__(self):
        super().__init__("cannot draw a non-zero number from the interval [0, 0]")


class GradientError(GeometryError, ValueError):
    pass


class InvalidNumberOfColorLocationPairsError(GradientError):
    def __init__(self, count: int):
        super().__init__(f"a gradient needs at least 2 color/location pairs, got {count}")
        self.count = count


class MismatchedColorAndLocationArraySizesError(GradientError):
    def __init__(self, n_colors: int, n_locations: int):
        super().__init__(f"got {n_colors} colors but {n_locations} locations")
        self.n_colors = n_colors
        self.n_locations = n_locations


class InvalidColorLocationsError(GradientError):
    def __init__(self, location: float):
        super().__init__(f"all color locations are equal ({location}); cannot normalize them")
        self.location = location
