"""SVG path data parser — facade over svgpathtools.

Reads blob path data (or the first ``<path>`` of an SVG document) back into
a BlobPath. Anything that is not one closed loop of cubic segments is
rejected.
"""

from __future__ import annotations

import logging
import re

from svgpathtools import CubicBezier, Line, parse_path

from app.engine.errors import PathParseError
from app.engine.shapes import BlobPath, CubicSegment, Point

logger = logging.getLogger(__name__)

_PATH_D_RE = re.compile(r'<path[^>]*\sd\s*=\s*"([^"]+)"[^>]*/?\s*>', re.IGNORECASE)


def extract_path_data(svg_text: str) -> str:
    """Return the ``d`` attribute of the first ``<path>`` element."""
    match = _PATH_D_RE.search(svg_text)
    if match is None:
        raise PathParseError("no <path d=...> element found")
    return match.group(1)


def parse_path_data(d: str) -> BlobPath:
    """Parse ``M … C … Z`` path data into a BlobPath."""
    try:
        path = parse_path(d)
    except Exception as e:
        raise PathParseError(f"unreadable path data: {e}") from e

    segments: list[CubicSegment] = []
    for seg in path:
        if isinstance(seg, Line) and seg.start == seg.end:
            # zero-length closing line
            continue
        if not isinstance(seg, CubicBezier):
            raise PathParseError(f"expected cubic segments only, found {type(seg).__name__}")
        segments.append(
            CubicSegment(
                Point.from_complex(seg.start),
                Point.from_complex(seg.control1),
                Point.from_complex(seg.control2),
                Point.from_complex(seg.end),
            )
        )

    if len(segments) < 3:
        raise PathParseError(f"a blob needs at least 3 segments, found {len(segments)}")
    if not path.iscontinuous():
        raise PathParseError("path has more than one sub-path")
    if not path.isclosed():
        raise PathParseError("path is not closed")

    logger.debug("Parsed blob path: %d segments", len(segments))
    return BlobPath(start=segments[0].start, segments=tuple(segments))


def parse_svg(svg_text: str) -> BlobPath:
    """Parse the first path of an SVG document."""
    return parse_path_data(extract_path_data(svg_text))
