"""Morph animation packaging — SMIL animated SVG and CSS keyframes.

Both formats loop: frame 0 is repeated at the end so the last frame morphs
back into the first.
"""

from __future__ import annotations

from app.engine.errors import EmptyFrameSequence, InvalidFrameCount
from app.svg.serializer import serialize_svg

_SEPARATOR = "; "

# Three-decimal key times stay strictly increasing up to this many frames
MAX_FRAMES = 1000


def _require_frames(path_data: list[str]) -> None:
    if not path_data:
        raise EmptyFrameSequence("no frames to animate")


def key_times(frame_count: int) -> list[str]:
    """``frame_count + 1`` evenly spaced fractions from 0.000 to 1.000."""
    if frame_count < 1:
        raise EmptyFrameSequence("no frames to animate")
    if frame_count > MAX_FRAMES:
        raise InvalidFrameCount(f"at most {MAX_FRAMES} frames fit three-decimal key times, got {frame_count}")
    return [f"{i / frame_count:.3f}" for i in range(frame_count + 1)]


def animation_values(path_data: list[str]) -> str:
    """All frames joined, then frame 0 again to close the loop."""
    _require_frames(path_data)
    return _SEPARATOR.join([*path_data, path_data[0]])


def build_animated_svg(
    path_data: list[str],
    duration: str = "4s",
    fill: str = "#3498db",
    view_box: float = 200.0,
) -> str:
    """Self-contained animated SVG that morphs through every frame."""
    _require_frames(path_data)
    times = _SEPARATOR.join(key_times(len(path_data)))
    lines = [
        f'<svg viewBox="0 0 {view_box:g} {view_box:g}" xmlns="http://www.w3.org/2000/svg">',
        f'  <path fill="{fill}" d="{path_data[0]}">',
        "    <animate ",
        '      attributeName="d" ',
        f'      dur="{duration}" ',
        '      repeatCount="indefinite"',
        f'      keyTimes="{times}"',
        f'      values="{animation_values(path_data)}">',
        "    </animate>",
        "  </path>",
        "</svg>",
    ]
    return "\n".join(lines)


def build_keyframes_css(path_data: list[str], name: str = "morph") -> str:
    """CSS ``@keyframes`` block animating the ``d`` property."""
    _require_frames(path_data)
    step = 100 / len(path_data)
    lines = [f"@keyframes {name} {{"]
    for index, d in enumerate(path_data):
        # halves round up, not to even
        percentage = int(step * index + 0.5)
        lines.append(f'  {percentage}% {{ d: "{d}"; }}')
    lines.append(f'  100% {{ d: "{path_data[0]}"; }}')
    lines.append("}")
    return "\n".join(lines)


def build_static_svg(path_data: str, fill: str = "#3498db", view_box: float = 200.0) -> str:
    """Preview of a single frame."""
    return serialize_svg(path_data, fill=fill, view_box=view_box)
