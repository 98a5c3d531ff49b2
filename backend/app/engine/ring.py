"""Random vertex rings for blob outlines.

Places ``complexity`` points at even angular steps around the center of the
drawing space, each at a radius drawn uniformly from
``[base_radius - contrast, base_radius + contrast)``. Index 0 points straight
up and indices advance clockwise on screen.
"""

from __future__ import annotations

import logging
import math
import numbers

import numpy as np

from app.engine.config import BlobConfig
from app.engine.errors import InvalidComplexity, InvalidContrast
from app.engine.shapes import Point, Ring
from app.utils.geometry import polar_to_cartesian

logger = logging.getLogger(__name__)


def validate_complexity(complexity: object, minimum: int = 3) -> int:
    if isinstance(complexity, bool) or not isinstance(complexity, numbers.Integral):
        raise InvalidComplexity(f"complexity must be an integer, got {complexity!r}")
    if complexity < minimum:
        raise InvalidComplexity(f"complexity must be >= {minimum}, got {complexity}")
    return int(complexity)


def validate_contrast(contrast: object) -> float:
    if isinstance(contrast, bool) or not isinstance(contrast, numbers.Real):
        raise InvalidContrast(f"contrast must be a number, got {contrast!r}")
    value = float(contrast)
    if not math.isfinite(value) or value < 0:
        raise InvalidContrast(f"contrast must be a finite value >= 0, got {contrast}")
    return value


def generate_ring(
    complexity: int,
    contrast: float,
    base_radius: float | None = None,
    rng: np.random.Generator | None = None,
    config: BlobConfig | None = None,
) -> Ring:
    """Generate one perturbed ring of points.

    One uniform draw is consumed from ``rng`` per point, in index order, so a
    seeded generator always yields the same ring.
    """
    config = config or BlobConfig()
    n = validate_complexity(complexity, config.min_complexity)
    spread = validate_contrast(contrast)
    radius = config.base_radius if base_radius is None else float(base_radius)
    rng = rng if rng is not None else np.random.default_rng()

    angle_step = 360.0 / n
    angles = angle_step * np.arange(n, dtype=np.float64)
    radii = radius - spread + rng.random(n) * spread * 2

    coords = polar_to_cartesian(angles, radii, config.center)
    logger.debug("Ring: %d points, radius %.1f ± %.1f", n, radius, spread)
    return tuple(Point(float(x), float(y)) for x, y in coords)
