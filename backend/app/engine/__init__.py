"""Blob geometry engine — perturbed point rings and closed Catmull-Rom curves."""

from app.engine.config import BlobConfig
from app.engine.frames import build_frames, create_blob
from app.engine.ring import generate_ring
from app.engine.shapes import BlobPath, CubicSegment, FrameSequence, Point, Ring
from app.engine.spline import build_closed_path, catmull_rom_to_bezier

__all__ = [
    "BlobConfig",
    "BlobPath",
    "CubicSegment",
    "FrameSequence",
    "Point",
    "Ring",
    "build_closed_path",
    "build_frames",
    "catmull_rom_to_bezier",
    "create_blob",
    "generate_ring",
]
