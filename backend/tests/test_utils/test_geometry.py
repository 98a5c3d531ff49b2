"""Tests for leaf geometry helpers and the shape data model."""

from __future__ import annotations

import numpy as np
import pytest
from svgpathtools import CubicBezier

from app.engine.shapes import BlobPath, CubicSegment, Point
from app.utils.geometry import polar_to_cartesian
from tests.conftest import polar_angles, radial_distances


def test_polar_zero_degrees_points_up():
    pts = polar_to_cartesian(np.array([0.0, 90.0, 180.0, 270.0]), np.full(4, 10.0), (0.0, 0.0))
    expected = np.array([[0, -10], [10, 0], [0, 10], [-10, 0]], dtype=float)
    assert np.allclose(pts, expected, atol=1e-12)


def test_polar_to_cartesian_keeps_radius_and_angle():
    angles = np.array([0.0, 45.0, 170.0, 300.0])
    pts = polar_to_cartesian(angles, np.full(4, 5.0), (100.0, 100.0))
    assert np.allclose(radial_distances(pts), 5.0)
    assert np.allclose(polar_angles(pts), angles)


def test_point_arithmetic():
    a = Point(1.0, 2.0)
    b = Point(4.0, 6.0)
    assert a + b == Point(5.0, 8.0)
    assert b - a == Point(3.0, 4.0)
    assert a * 2 == Point(2.0, 4.0)
    assert a.distance_to(b) == 5.0
    assert Point.from_complex(a.to_complex()) == a


def test_segment_point_at_matches_svgpathtools():
    seg = CubicSegment(Point(0, 0), Point(2, 6), Point(8, 6), Point(10, 0))
    cubic = CubicBezier(0j, 2 + 6j, 8 + 6j, 10 + 0j)
    for t in np.linspace(0, 1, 7):
        got = seg.point_at(float(t))
        want = cubic.point(float(t))
        assert (got.x, got.y) == pytest.approx((want.real, want.imag))


def test_segment_midpoint():
    seg = CubicSegment(Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0))
    assert seg.point_at(0.5) == Point(1.5, 0.0)


def test_empty_blob_path_is_open():
    path = BlobPath(start=Point(0, 0), segments=())
    assert not path.is_closed
    assert path.end == Point(0, 0)
    assert len(path) == 0
