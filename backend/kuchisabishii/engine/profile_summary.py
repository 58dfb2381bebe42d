"""Profile summary: the headline numbers shown next to a taste radar."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from kuchisabishii.engine.config import RadarConfig
from kuchisabishii.engine.radar_layout import layout_for_config
from kuchisabishii.engine.slider import value_to_slider_percent
from kuchisabishii.models.taste import AXIS_INFO, AxisCategory, TasteAxis, TasteVector
from kuchisabishii.utils.geometry import polygon_area

# A value in the top 20% of the scale counts as a strong preference.
_STRONG_FRACTION = 0.8

_TOP_AXES = 5

# Checked in order after adventurousness; first strong axis wins.
_PERSONALITIES: tuple[tuple[TasteAxis, str], ...] = (
    (TasteAxis.SWEET, "Sweet Tooth"),
    (TasteAxis.SPICY, "Heat Seeker"),
    (TasteAxis.SALTY, "Savory Lover"),
)


@dataclass
class ProfileSummary:
    overall_intensity: float
    intensity_percent: float
    dominant_axis: str
    top_axes: list[tuple[str, float]] = field(default_factory=list)
    category_means: dict[str, float] = field(default_factory=dict)
    coverage: float = 0.0
    personality: str = "Balanced Eater"


def flavor_personality(
    vector: TasteVector,
    config: RadarConfig,
    adventurousness: float | None = None,
) -> str:
    threshold = config.scale.min + _STRONG_FRACTION * config.scale.span
    if adventurousness is not None and adventurousness >= threshold:
        return "Culinary Explorer"
    profile = vector.to_profile()
    for axis, name in _PERSONALITIES:
        if profile.get(axis, config.scale.min) >= threshold:
            return name
    return "Balanced Eater"


def summarize_profile(
    vector: TasteVector,
    config: RadarConfig,
    adventurousness: float | None = None,
) -> ProfileSummary:
    """Raises the layout errors for vectors with fewer than three axes or a bad scale."""
    layout = layout_for_config(vector, config)

    values = np.array(vector.values(), dtype=np.float64)
    intensity = float(np.mean(values))

    # max() keeps the first entry on ties
    dominant = max(vector.axes, key=lambda a: a.value)
    ranked = sorted(vector.axes, key=lambda a: a.value, reverse=True)

    by_category: dict[AxisCategory, list[float]] = {}
    for entry in vector.axes:
        if entry.axis is not None:
            by_category.setdefault(AXIS_INFO[entry.axis].category, []).append(entry.value)

    outer = polygon_area(np.array(layout.axis_anchor_points))
    inner = polygon_area(np.array(layout.data_points))

    return ProfileSummary(
        overall_intensity=round(intensity, 2),
        intensity_percent=round(
            value_to_slider_percent(intensity, config.scale.min, config.scale.max), 1
        ),
        dominant_axis=dominant.label,
        top_axes=[(a.label, a.value) for a in ranked[:_TOP_AXES]],
        category_means={c.value: round(float(np.mean(v)), 2) for c, v in by_category.items()},
        coverage=round(inner / outer, 4) if outer > 0 else 0.0,
        personality=flavor_personality(vector, config, adventurousness),
    )
