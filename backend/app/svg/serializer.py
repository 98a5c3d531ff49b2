"""Write SVG path data and markup from blob paths."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from app.engine.shapes import BlobPath, Point


def format_number(value: float, precision: int | None = 2) -> str:
    """Fixed-decimal rendering; ``precision=None`` keeps full float precision.

    Rounds the exact binary value, ties away from zero (0.125 -> "0.13").
    """
    if precision is None:
        return repr(float(value))
    quantum = Decimal(1).scaleb(-precision)
    return f"{Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP):f}"


def _pair(p: Point, precision: int | None) -> str:
    return f"{format_number(p.x, precision)},{format_number(p.y, precision)}"


def path_to_d(path: BlobPath, precision: int | None = 2) -> str:
    """Serialize to ``M x,y C c1 c2 end … Z`` drawing commands."""
    parts = [f"M {_pair(path.start, precision)}"]
    for seg in path.segments:
        parts.append(
            f"C {_pair(seg.control1, precision)} {_pair(seg.control2, precision)} {_pair(seg.end, precision)}"
        )
    parts.append("Z")
    return " ".join(parts)


def frames_to_d(frames: list[BlobPath], precision: int | None = 2) -> list[str]:
    return [path_to_d(f, precision) for f in frames]


def serialize_svg(path_data: str, fill: str = "#3498db", view_box: float = 200.0) -> str:
    """Single-path SVG document."""
    return (
        f'<svg viewBox="0 0 {view_box:g} {view_box:g}" xmlns="http://www.w3.org/2000/svg">'
        f'<path d="{path_data}" fill="{fill}"></path></svg>'
    )
