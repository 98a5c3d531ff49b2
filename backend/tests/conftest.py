"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from app.engine.config import BlobConfig
from app.engine.ring import generate_ring
from app.engine.shapes import Point

CENTER = Point(100.0, 100.0)
BASE_RADIUS = 80.0

# complexity=6, contrast=0: a regular hexagon, first vertex straight up
HEXAGON_ANGLES = [-90.0, -30.0, 30.0, 90.0, 150.0, 210.0]
HEXAGON_D_PREFIX = "M 100.00,20.00 C 123.09,20.00 157.74,40.00 169.28,60.00"

SQUARE_RING = (
    Point(0.0, 0.0),
    Point(10.0, 0.0),
    Point(10.0, 10.0),
    Point(0.0, 10.0),
)


def ring_to_array(ring) -> np.ndarray:
    """Nx2 array of (x, y)."""
    return np.array([(p.x, p.y) for p in ring], dtype=np.float64)


def radial_distances(points: np.ndarray, center: Point = CENTER) -> np.ndarray:
    return np.hypot(points[:, 0] - center.x, points[:, 1] - center.y)


def polar_angles(points: np.ndarray, center: Point = CENTER) -> np.ndarray:
    """Degrees around center, 0 = up, clockwise on screen, in [0, 360)."""
    raw = np.degrees(np.arctan2(points[:, 1] - center.y, points[:, 0] - center.x))
    return (raw + 90.0) % 360.0


class FixedRandom:
    """Stands in for numpy's Generator, returning the same draw every time."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls: list[int] = []

    def random(self, size: int) -> np.ndarray:
        self.calls.append(size)
        return np.full(size, self.value)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def config() -> BlobConfig:
    return BlobConfig()


@pytest.fixture
def hexagon_ring():
    return generate_ring(6, 0)
