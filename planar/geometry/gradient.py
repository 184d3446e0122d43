from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence, Tuple

import numpy as np

from planar.geometry.color import RGBA
from planar.geometry.errors import (
    InvalidColorLocationsError,
    InvalidNumberOfColorLocationPairsError,
    MismatchedColorAndLocationArraySizesError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Gradient:
    """Ordered colour stops at locations normalized into [0, 1]."""

    colors: Tuple[RGBA, ...]
    locations: np.ndarray

    def __len__(self) -> int:
        return len(self.colors)

    @property
    def components(self) -> np.ndarray:
        """Flattened [r, g, b, a, r, g, b, a, ...] in stop order."""
        return np.concatenate([c.as_array() for c in self.colors])

    def color_at(self, t: float) -> RGBA:
        """Linear interpolation between neighbouring stops, clamped at both ends."""
        comps = np.stack([c.as_array() for c in self.colors])
        r, g, b, a = (float(np.interp(t, self.locations, comps[:, i])) for i in range(4))
        return RGBA(r, g, b, a)


def rgba_gradient(colors: Sequence[RGBA], locations: Sequence[float]) -> Gradient:
    n = len(locations)
    if n <= 1:
        raise InvalidNumberOfColorLocationPairsError(n)
    if len(colors) != n:
        raise MismatchedColorAndLocationArraySizesError(len(colors), n)

    locs = np.asarray(locations, dtype=float)
    lo = float(locs.min())
    span = float(locs.max()) - lo
    if span == 0:
        raise InvalidColorLocationsError(lo)
    normalized = (locs - lo) / span

    # stable, so equal locations keep their input order
    order = np.argsort(normalized, kind="stable")
    logger.debug("building %d-stop gradient over [%g, %g]", n, lo, lo + span)
    return Gradient(
        colors=tuple(colors[i] for i in order),
        locations=normalized[order],
    )
