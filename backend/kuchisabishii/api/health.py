"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from kuchisabishii.engine.config import RADAR_PRESETS
from kuchisabishii.models.responses import AxesResponse, AxisMeta, HealthResponse
from kuchisabishii.models.taste import ALL_TASTES, AXIS_INFO

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        axes_registered=len(ALL_TASTES),
    )


@router.get("/axes", response_model=AxesResponse)
async def axes() -> AxesResponse:
    return AxesResponse(
        axes=[
            AxisMeta(
                axis=axis.value,
                label=AXIS_INFO[axis].label,
                color=AXIS_INFO[axis].color,
                category=AXIS_INFO[axis].category.value,
            )
            for axis in ALL_TASTES
        ],
        presets=list(RADAR_PRESETS),
    )
