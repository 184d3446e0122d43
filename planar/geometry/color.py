from __future__ import annotations

import colorsys
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from planar.geometry.scalar import random01


@dataclass(frozen=True)
class RGBA:
    """Colour with red, green, blue and alpha components in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = float(getattr(self, name))
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
            object.__setattr__(self, name, value)

    @classmethod
    def from_hsb(cls, hue: float, saturation: float, brightness: float, alpha: float = 1.0) -> "RGBA":
        r, g, b = colorsys.hsv_to_rgb(hue, saturation, brightness)
        return cls(r, g, b, alpha)

    @classmethod
    def white(cls, white: float, alpha: float = 1.0) -> "RGBA":
        return cls(white, white, white, alpha)

    @classmethod
    def random_rgb(cls, rng: Optional[np.random.Generator] = None) -> "RGBA":
        return cls(random01(rng), random01(rng), random01(rng))

    @classmethod
    def random_rgba(cls, rng: Optional[np.random.Generator] = None) -> "RGBA":
        return cls(random01(rng), random01(rng), random01(rng), random01(rng))

    @classmethod
    def random_hsb(cls, rng: Optional[np.random.Generator] = None) -> "RGBA":
        return cls.from_hsb(random01(rng), random01(rng), random01(rng))

    def components(self) -> Tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)

    def as_array(self) -> np.ndarray:
        return np.array(self.components(), dtype=float)
