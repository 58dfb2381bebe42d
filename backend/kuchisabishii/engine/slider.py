"""Linear slider mapping for profile editing.

percent = (value − min) · 100 / (max − min)
value   = min + percent · (max − min) / 100

The two functions are exact inverses and do not clamp; range inputs already
constrain what the user can reach.
"""

from __future__ import annotations

from kuchisabishii.engine.config import ValueScale
from kuchisabishii.engine.radar_layout import validate_scale
from kuchisabishii.utils import math_helpers


def value_to_slider_percent(value: float, min_value: float, max_value: float) -> float:
    scale = ValueScale(min_value, max_value)
    validate_scale(scale)
    return (value - scale.min) * 100.0 / scale.span


def slider_percent_to_value(percent: float, min_value: float, max_value: float) -> float:
    scale = ValueScale(min_value, max_value)
    validate_scale(scale)
    return scale.min + percent * scale.span / 100.0


def snap_to_step(value: float, step: float, min_value: float, max_value: float) -> float:
    """Round to the slider's step grid (anchored at min) and clamp into the scale."""
    scale = ValueScale(min_value, max_value)
    validate_scale(scale)
    snapped = math_helpers.snap_to_step(value, step, origin=scale.min)
    return math_helpers.clamp(snapped, scale.min, scale.max)
