"""Engine configuration — geometric constants of the blob drawing space."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BlobConfig:
    """Controls where and how blob shapes are laid out."""

    # Drawing space: a square viewBox of this size, blobs centered inside it
    view_box: float = 200.0
    center_x: float = 100.0
    center_y: float = 100.0

    # Nominal radius the contrast band is centered on
    base_radius: float = 80.0

    # Catmull-Rom → Bézier control-point factor
    tension: float = 1 / 6

    # Smallest ring that still closes into a curve
    min_complexity: int = 3

    @property
    def center(self) -> tuple[float, float]:
        return (self.center_x, self.center_y)
