"""POST /api/radar/*: chart layout and SVG rendering."""

from __future__ import annotations

import dataclasses

from fastapi import APIRouter, Depends

from kuchisabishii.api.errors import unprocessable
from kuchisabishii.config import Settings
from kuchisabishii.dependencies import get_settings
from kuchisabishii.engine.config import RadarConfig, ValueScale, get_preset
from kuchisabishii.engine.radar_layout import RadarLayoutError, compute_radar_layout
from kuchisabishii.models.requests import RadarRequest, RadarSvgRequest
from kuchisabishii.models.responses import LayoutResponse, SvgResponse
from kuchisabishii.models.taste import TasteVector
from kuchisabishii.svg.radar_chart import render_radar_svg

router = APIRouter(prefix="/radar")


def resolve_config(req: RadarRequest, settings: Settings) -> RadarConfig:
    """Preset geometry with any per-request overrides applied. Raises KeyError for unknown presets."""
    config = get_preset(req.preset or settings.default_radar_preset)
    overrides: dict = {}
    if req.radius is not None:
        overrides["radius"] = req.radius
    if req.label_offset is not None:
        overrides["label_offset"] = req.label_offset
    if req.scale_min is not None or req.scale_max is not None:
        overrides["scale"] = ValueScale(
            req.scale_min if req.scale_min is not None else config.scale.min,
            req.scale_max if req.scale_max is not None else config.scale.max,
        )
    return dataclasses.replace(config, **overrides) if overrides else config


def _center(req: RadarRequest, config: RadarConfig) -> tuple[float, float]:
    cx, cy = config.center
    return (
        req.center_x if req.center_x is not None else cx,
        req.center_y if req.center_y is not None else cy,
    )


@router.post("/layout", response_model=LayoutResponse)
async def radar_layout(req: RadarRequest, settings: Settings = Depends(get_settings)) -> LayoutResponse:
    try:
        config = resolve_config(req, settings)
        layout = compute_radar_layout(
            req.axes,
            center=_center(req, config),
            radius=config.radius,
            value_scale=config.scale,
            label_offset=config.label_offset,
        )
    except (KeyError, RadarLayoutError) as e:
        raise unprocessable(e) from e

    return LayoutResponse.from_layout(layout)


@router.post("/svg", response_model=SvgResponse)
async def radar_svg(req: RadarSvgRequest, settings: Settings = Depends(get_settings)) -> SvgResponse:
    try:
        config = resolve_config(req, settings)
        svg = render_radar_svg(TasteVector(axes=req.axes), config, title=req.title)
    except (KeyError, RadarLayoutError) as e:
        raise unprocessable(e) from e

    return SvgResponse(svg=svg)
