"""Radar layout: map an N-axis taste vector onto 2D chart coordinates.

Axis i sits at angle θ_i = i·(2π/N) − π/2, so axis 0 points straight up
(SVG y grows downward). Three point sets share those angles:

    anchors  distance = radius                     (grid spokes, value-independent)
    data     distance = radius · normalize(value)  (polygon vertices)
    labels   distance = radius + label_offset      (axis names)

Values outside the scale are clamped, so data points never leave the chart.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from kuchisabishii.engine.config import RadarConfig, ValueScale
from kuchisabishii.models.taste import AxisValue, TasteVector
from kuchisabishii.utils.geometry import polar_points, to_tuples

logger = logging.getLogger(__name__)

MIN_AXES = 3

Point = tuple[float, float]


class RadarLayoutError(ValueError):
    """Malformed chart configuration passed by the caller."""


class InvalidAxisCount(RadarLayoutError):
    pass


class InvalidRadius(RadarLayoutError):
    pass


class InvalidScale(RadarLayoutError):
    pass


class InvalidGeometry(RadarLayoutError):
    """Non-finite center or label offset."""


class InvalidAxisValue(RadarLayoutError):
    """NaN or infinite axis value."""


def validate_scale(scale: ValueScale) -> None:
    if not (math.isfinite(scale.min) and math.isfinite(scale.max)):
        raise InvalidScale(f"scale bounds must be finite, got [{scale.min}, {scale.max}]")
    if not scale.max > scale.min:
        raise InvalidScale(f"scale max must exceed min, got [{scale.min}, {scale.max}]")


@dataclass(frozen=True)
class RadarLayout:
    center: Point
    radius: float
    angles: tuple[float, ...]
    axis_anchor_points: tuple[Point, ...]
    data_points: tuple[Point, ...]
    label_points: tuple[Point, ...]

    @property
    def num_axes(self) -> int:
        return len(self.angles)

    def polygon(self) -> list[Point]:
        """Data points in axis order, closed back onto the first point."""
        return [*self.data_points, self.data_points[0]]

    def svg_points(self, decimals: int = 2) -> str:
        """Data points formatted for an SVG ``points`` attribute."""
        return " ".join(f"{x:.{decimals}f},{y:.{decimals}f}" for x, y in self.data_points)


def axis_angles(n: int) -> np.ndarray:
    """Spoke angles in radians, axis 0 at the top."""
    return np.arange(n) * (2 * math.pi / n) - math.pi / 2


def compute_radar_layout(
    axes: TasteVector | Sequence[AxisValue],
    center: Point,
    radius: float,
    value_scale: ValueScale,
    label_offset: float = 0.0,
) -> RadarLayout:
    """Compute anchor, data and label points for a radar chart.

    Raises InvalidAxisCount (N < 3), InvalidRadius (radius <= 0 or not
    finite), InvalidScale (max <= min or a non-finite bound), InvalidGeometry
    (non-finite center or label offset) or InvalidAxisValue (NaN or inf value).
    """
    entries = axes.axes if isinstance(axes, TasteVector) else list(axes)
    n = len(entries)

    if n < MIN_AXES:
        raise InvalidAxisCount(f"radar chart needs at least {MIN_AXES} axes, got {n}")
    if not (math.isfinite(radius) and radius > 0):
        raise InvalidRadius(f"radius must be positive and finite, got {radius}")
    validate_scale(value_scale)
    if not all(math.isfinite(c) for c in (*center, label_offset)):
        raise InvalidGeometry(f"center and label_offset must be finite, got {center}, {label_offset}")

    for entry in entries:
        if not math.isfinite(entry.value):
            raise InvalidAxisValue(f"{entry.label} value must be finite, got {entry.value}")
        if not value_scale.contains(entry.value):
            logger.debug(
                "Clamping %s=%s into [%s, %s]",
                entry.label, entry.value, value_scale.min, value_scale.max,
            )

    angles = axis_angles(n)
    fractions = np.array([value_scale.normalize(e.value) for e in entries], dtype=np.float64)

    anchors = polar_points(center, np.full(n, float(radius)), angles)
    data = polar_points(center, radius * fractions, angles)
    labels = polar_points(center, np.full(n, float(radius + label_offset)), angles)

    return RadarLayout(
        center=(float(center[0]), float(center[1])),
        radius=float(radius),
        angles=tuple(float(a) for a in angles),
        axis_anchor_points=to_tuples(anchors),
        data_points=to_tuples(data),
        label_points=to_tuples(labels),
    )


def layout_for_config(axes: TasteVector | Sequence[AxisValue], config: RadarConfig) -> RadarLayout:
    return compute_radar_layout(
        axes,
        center=config.center,
        radius=config.radius,
        value_scale=config.scale,
        label_offset=config.label_offset,
    )
