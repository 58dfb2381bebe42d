"""Kuchisabishii taste-radar geometry engine."""

from kuchisabishii.engine.config import RADAR_PRESETS, RadarConfig, ValueScale, get_preset
from kuchisabishii.engine.radar_layout import (
    InvalidAxisCount,
    InvalidAxisValue,
    InvalidGeometry,
    InvalidRadius,
    InvalidScale,
    RadarLayout,
    RadarLayoutError,
    compute_radar_layout,
    layout_for_config,
)
from kuchisabishii.engine.slider import slider_percent_to_value, snap_to_step, value_to_slider_percent

__all__ = [
    "RADAR_PRESETS",
    "RadarConfig",
    "ValueScale",
    "get_preset",
    "InvalidAxisCount",
    "InvalidAxisValue",
    "InvalidGeometry",
    "InvalidRadius",
    "InvalidScale",
    "RadarLayout",
    "RadarLayoutError",
    "compute_radar_layout",
    "layout_for_config",
    "slider_percent_to_value",
    "snap_to_step",
    "value_to_slider_percent",
]
