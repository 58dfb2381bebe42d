"""Render a taste radar chart as SVG."""

from __future__ import annotations

from typing import Any

from kuchisabishii.engine.config import RadarConfig
from kuchisabishii.engine.radar_layout import RadarLayout, layout_for_config
from kuchisabishii.models.taste import TasteVector
from kuchisabishii.svg.serializer import serialize_svg

GRID_STROKE = "#e5e7eb"
POLYGON_FILL = "rgba(168, 85, 247, 0.15)"
POLYGON_STROKE = "#a855f7"
LABEL_FILL = "#374151"


def _r(v: float) -> str:
    return str(round(v, 2))


def radar_elements(vector: TasteVector, layout: RadarLayout, config: RadarConfig) -> list[dict[str, Any]]:
    """Element dicts in paint order: rings, spokes, polygon, dots, labels."""
    cx, cy = layout.center
    elements: list[dict[str, Any]] = []

    for level in config.grid_levels:
        elements.append({
            "tag": "circle",
            "cx": _r(cx),
            "cy": _r(cy),
            "r": _r(config.scale.normalize(level) * layout.radius),
            "fill": "none",
            "stroke": GRID_STROKE,
            "stroke-width": "1",
        })

    for x, y in layout.axis_anchor_points:
        elements.append({
            "tag": "line",
            "x1": _r(cx),
            "y1": _r(cy),
            "x2": _r(x),
            "y2": _r(y),
            "stroke": GRID_STROKE,
            "stroke-width": "1",
        })

    elements.append({
        "tag": "polygon",
        "points": layout.svg_points(),
        "fill": POLYGON_FILL,
        "stroke": POLYGON_STROKE,
        "stroke-width": "2",
    })

    for entry, (x, y) in zip(vector.axes, layout.data_points):
        elements.append({
            "tag": "circle",
            "cx": _r(x),
            "cy": _r(y),
            "r": _r(config.point_radius),
            "fill": entry.color,
            "stroke": "white",
            "stroke-width": "2",
        })

    for entry, (x, y) in zip(vector.axes, layout.label_points):
        elements.append({
            "tag": "text",
            "x": _r(x),
            "y": _r(y),
            "text-anchor": "middle",
            "dominant-baseline": "middle",
            "font-size": "12",
            "fill": LABEL_FILL,
            "text": entry.label,
        })

    return elements


def render_radar_svg(vector: TasteVector, config: RadarConfig, title: str = "") -> str:
    """Full SVG document for a taste vector. Raises the layout errors on bad input."""
    layout = layout_for_config(vector, config)
    elements = radar_elements(vector, layout, config)
    return serialize_svg(
        elements,
        canvas_w=config.size,
        canvas_h=config.size,
        title=title,
        description=", ".join(f"{a.label} {a.value:g}" for a in vector.axes),
    )
