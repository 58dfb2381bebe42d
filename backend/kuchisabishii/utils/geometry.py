"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def polar_points(
    center: tuple[float, float],
    distances: NDArray[np.float64],
    angles: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Place points at (distance, angle) around center. Returns Nx2 array."""
    cx, cy = center
    xs = cx + distances * np.cos(angles)
    ys = cy + distances * np.sin(angles)
    return np.column_stack([xs, ys])


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area of a closed ring. Positive = CCW, Negative = CW."""
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


def polygon_area(points: NDArray[np.float64]) -> float:
    """Unsigned area of a polygon given as an open or closed ring."""
    if len(points) < 3:
        return 0.0
    if not np.array_equal(points[0], points[-1]):
        points = np.vstack([points, points[:1]])
    return abs(signed_area(points))


def to_tuples(points: NDArray[np.float64]) -> tuple[tuple[float, float], ...]:
    """Nx2 array → tuple of plain-float (x, y) pairs."""
    return tuple((float(x), float(y)) for x, y in points)
