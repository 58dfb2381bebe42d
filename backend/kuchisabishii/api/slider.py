"""POST /api/slider/*: value ↔ slider percent conversion."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from kuchisabishii.api.errors import unprocessable
from kuchisabishii.config import Settings
from kuchisabishii.dependencies import get_settings
from kuchisabishii.engine.radar_layout import RadarLayoutError
from kuchisabishii.engine.slider import slider_percent_to_value, snap_to_step, value_to_slider_percent
from kuchisabishii.models.requests import SliderPercentRequest, SliderValueRequest
from kuchisabishii.models.responses import SliderPercentResponse, SliderValueResponse

router = APIRouter(prefix="/slider")


@router.post("/percent", response_model=SliderPercentResponse)
async def to_percent(req: SliderPercentRequest) -> SliderPercentResponse:
    try:
        percent = value_to_slider_percent(req.value, req.scale_min, req.scale_max)
    except RadarLayoutError as e:
        raise unprocessable(e) from e
    return SliderPercentResponse(percent=percent)


@router.post("/value", response_model=SliderValueResponse)
async def to_value(req: SliderValueRequest, settings: Settings = Depends(get_settings)) -> SliderValueResponse:
    try:
        value = slider_percent_to_value(req.percent, req.scale_min, req.scale_max)
        if req.snap:
            value = snap_to_step(value, settings.slider_step, req.scale_min, req.scale_max)
    except (RadarLayoutError, ValueError) as e:
        raise unprocessable(e) from e
    return SliderValueResponse(value=value)
