"""Smooth closed outline through a ring of points, as cubic Béziers.

For ring index i the four neighbours p0..p3 are taken with circular
wraparound and the segment p1 → p2 gets control points

    c1 = p1 + (p2 - p0) * tension
    c2 = p2 - (p3 - p1) * tension

With tension 1/6 this is the uniform Catmull-Rom spline: the curve passes
through every ring point and is C1-continuous at each of them, including
the seam between the last and first point.
"""

from __future__ import annotations

from collections.abc import Sequence

from app.engine.config import BlobConfig
from app.engine.errors import EmptyRing
from app.engine.shapes import BlobPath, CubicSegment, Point

_MIN_RING_POINTS = 3


def catmull_rom_to_bezier(
    p0: Point,
    p1: Point,
    p2: Point,
    p3: Point,
    tension: float = 1 / 6,
) -> tuple[Point, Point]:
    """Control points of the Bézier that matches the Catmull-Rom span p1 → p2."""
    control1 = p1 + (p2 - p0) * tension
    control2 = p2 - (p3 - p1) * tension
    return control1, control2


def build_closed_path(ring: Sequence[Point], config: BlobConfig | None = None) -> BlobPath:
    """Build the closed blob outline through every point of ``ring``."""
    n = len(ring)
    if n < _MIN_RING_POINTS:
        raise EmptyRing(f"need at least {_MIN_RING_POINTS} points to close a curve, got {n}")
    tension = (config or BlobConfig()).tension

    segments = []
    for i in range(n):
        p0 = ring[(i - 1 + n) % n]
        p1 = ring[i]
        p2 = ring[(i + 1) % n]
        p3 = ring[(i + 2) % n]
        c1, c2 = catmull_rom_to_bezier(p0, p1, p2, p3, tension)
        segments.append(CubicSegment(p1, c1, c2, p2))

    return BlobPath(start=ring[0], segments=tuple(segments))
