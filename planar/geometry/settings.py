from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Small positive value used in floating-point comparisons.
DEFAULT_TOLERANCE = 1e-12


class GeometrySettings(BaseModel):
    tolerance: float = Field(
        default=DEFAULT_TOLERANCE,
        ge=0.0,
        description="Default tolerance for the is_nearly_* predicates.",
    )
    seed: Optional[int] = Field(default=None, description="Seed for the shared random generator.")


_settings = GeometrySettings()
_rng = np.random.default_rng(_settings.seed)


def get_settings() -> GeometrySettings:
    return _settings


def configure(**overrides) -> GeometrySettings:
    """Validate and install new settings, keeping unspecified fields.

    Reseeds the shared random generator, so configuring a seed makes every
    subsequent random point, vector, colour and scalar reproducible.
    """
    global _settings, _rng
    _settings = GeometrySettings(**{**_settings.model_dump(), **overrides})
    _rng = np.random.default_rng(_settings.seed)
    logger.debug("geometry settings: tolerance=%g seed=%s", _settings.tolerance, _settings.seed)
    return _settings


def reset_settings() -> GeometrySettings:
    global _settings, _rng
    _settings = GeometrySettings()
    _rng = np.random.default_rng(_settings.seed)
    return _settings


def default_rng() -> np.random.Generator:
    return _rng
