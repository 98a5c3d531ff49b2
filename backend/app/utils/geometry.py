"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def polar_to_cartesian(
    angles_deg: NDArray[np.float64],
    radii: NDArray[np.float64],
    center: tuple[float, float],
) -> NDArray[np.float64]:
    """Polar → Nx2 cartesian, with 0° pointing up (screen y grows downward)."""
    theta = (angles_deg - 90.0) * np.pi / 180.0
    cx, cy = center
    x = cx + radii * np.cos(theta)
    y = cy + radii * np.sin(theta)
    return np.column_stack([x, y])
