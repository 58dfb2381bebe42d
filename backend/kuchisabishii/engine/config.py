"""Chart configuration: value scale and radar geometry presets."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from kuchisabishii.utils.math_helpers import clamp


@dataclass(frozen=True)
class ValueScale:
    """The domain an axis value is expressed in."""

    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def normalize(self, value: float) -> float:
        """Clamp value into [min, max], then map to [0, 1]. Raises ValueError for NaN."""
        if math.isnan(value):
            raise ValueError("cannot normalize NaN")
        if value <= self.min:
            return 0.0
        if value >= self.max:
            return 1.0
        return clamp((value - self.min) / self.span, 0.0, 1.0)


@dataclass(frozen=True)
class RadarConfig:
    """Geometry of one radar chart instance."""

    size: float = 400.0
    radius: float = 150.0
    label_offset: float = 40.0
    scale: ValueScale = field(default_factory=lambda: ValueScale(0.0, 10.0))

    # Grid ring positions, in scale units
    grid_levels: tuple[float, ...] = (2.0, 4.0, 6.0, 8.0, 10.0)

    # Data-point dot radius
    point_radius: float = 8.0

    @property
    def center(self) -> tuple[float, float]:
        return (self.size / 2, self.size / 2)


# Palate tab: five basic tastes rated 0-5
BASIC_RADAR = RadarConfig(
    size=200.0,
    radius=70.0,
    label_offset=25.0,
    scale=ValueScale(0.0, 5.0),
    grid_levels=(1.0, 2.0, 3.0, 4.0, 5.0),
    point_radius=4.0,
)

# Onboarding results page
ONBOARDING_RADAR = RadarConfig(
    size=300.0,
    radius=100.0,
    label_offset=30.0,
    scale=ValueScale(0.0, 10.0),
    grid_levels=(2.0, 4.0, 6.0, 8.0, 10.0),
    point_radius=5.0,
)

# 11-dimension profile tab
ENHANCED_RADAR = RadarConfig()

RADAR_PRESETS: dict[str, RadarConfig] = {
    "basic": BASIC_RADAR,
    "onboarding": ONBOARDING_RADAR,
    "enhanced": ENHANCED_RADAR,
}


def get_preset(name: str) -> RadarConfig:
    """Look up a preset by name. Raises KeyError for unknown names."""
    try:
        return RADAR_PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown radar preset: {name!r}") from None
