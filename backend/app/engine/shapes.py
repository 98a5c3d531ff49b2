"""Blob shape data model — Point, CubicSegment, BlobPath.

Everything here is immutable. A ring is a plain ``tuple[Point, ...]`` and a
frame sequence is a plain ``list[BlobPath]`` held by the caller.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from svgpathtools import CubicBezier, Path


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_complex(self) -> complex:
        """svgpathtools represents points as complex numbers."""
        return complex(self.x, self.y)

    @classmethod
    def from_complex(cls, z: complex) -> Point:
        return cls(float(z.real), float(z.imag))


Ring = tuple[Point, ...]


@dataclass(frozen=True)
class CubicSegment:
    """One cubic Bézier from ``start`` to ``end``."""

    start: Point
    control1: Point
    control2: Point
    end: Point

    def point_at(self, t: float) -> Point:
        """Evaluate the Bernstein form at ``t`` in [0, 1]."""
        mt = 1.0 - t
        a = mt * mt * mt
        b = 3 * mt * mt * t
        c = 3 * mt * t * t
        d = t * t * t
        return Point(
            a * self.start.x + b * self.control1.x + c * self.control2.x + d * self.end.x,
            a * self.start.y + b * self.control1.y + c * self.control2.y + d * self.end.y,
        )

    def to_svgpathtools(self) -> CubicBezier:
        return CubicBezier(
            self.start.to_complex(),
            self.control1.to_complex(),
            self.control2.to_complex(),
            self.end.to_complex(),
        )


@dataclass(frozen=True)
class BlobPath:
    """One generated shape: a move-to ``start`` followed by closed cubic segments."""

    start: Point
    segments: tuple[CubicSegment, ...]

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def end(self) -> Point:
        if not self.segments:
            return self.start
        return self.segments[-1].end

    @property
    def is_closed(self) -> bool:
        return bool(self.segments) and self.end == self.start

    @property
    def vertices(self) -> Ring:
        """The ring the path interpolates, in drawing order."""
        return tuple(seg.start for seg in self.segments)

    def to_svgpathtools(self) -> Path:
        return Path(*(seg.to_svgpathtools() for seg in self.segments))


FrameSequence = list[BlobPath]
