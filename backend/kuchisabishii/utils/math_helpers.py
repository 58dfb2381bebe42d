"""Math helpers: clamping, snapping, weighted means. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))


def snap_to_step(value: float, step: float, origin: float = 0.0) -> float:
    """Snap a value to the nearest multiple of step measured from origin.

    Used for range inputs: 6.84 → 6.8 when step=0.1.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    snapped = origin + round((value - origin) / step) * step
    # Strip float noise from the multiplication (6.800000000000001 → 6.8)
    decimals = max(0, -int(np.floor(np.log10(step))) + 2)
    return round(snapped, decimals)


def weighted_mean(values: NDArray[np.float64], weights: NDArray[np.float64]) -> float:
    """Weighted arithmetic mean. Caller guarantees sum(weights) != 0."""
    return float(np.sum(values * weights) / np.sum(weights))
