"""Batches of independently drawn blobs, one per morph animation frame."""

from __future__ import annotations

import logging
import numbers
import time

import numpy as np

from app.engine.config import BlobConfig
from app.engine.errors import InvalidFrameCount
from app.engine.ring import generate_ring, validate_complexity, validate_contrast
from app.engine.shapes import BlobPath, FrameSequence
from app.engine.spline import build_closed_path

logger = logging.getLogger(__name__)


def create_blob(
    complexity: int,
    contrast: float,
    rng: np.random.Generator | None = None,
    config: BlobConfig | None = None,
) -> BlobPath:
    """Ring → closed path, the whole single-shape pipeline."""
    ring = generate_ring(complexity, contrast, rng=rng, config=config)
    return build_closed_path(ring, config)


def build_frames(
    count: int,
    complexity: int,
    contrast: float,
    rng: np.random.Generator | None = None,
    config: BlobConfig | None = None,
) -> FrameSequence:
    """Generate ``count`` blobs with the same parameters and fresh randomness.

    Frames share ``rng`` and consume it in order; none is derived from another.
    """
    if isinstance(count, bool) or not isinstance(count, numbers.Integral) or count < 1:
        raise InvalidFrameCount(f"frame count must be an integer >= 1, got {count!r}")
    config = config or BlobConfig()
    # Fail before drawing anything
    validate_complexity(complexity, config.min_complexity)
    validate_contrast(contrast)
    rng = rng if rng is not None else np.random.default_rng()

    start = time.perf_counter()
    frames = [create_blob(complexity, contrast, rng=rng, config=config) for _ in range(count)]
    logger.debug(
        "Built %d frames (complexity=%d, contrast=%s) in %.1fms",
        len(frames),
        complexity,
        contrast,
        (time.perf_counter() - start) * 1000,
    )
    return frames
