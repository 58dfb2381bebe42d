"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from kuchisabishii.api import health, profile, radar, slider

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(radar.router)
api_router.include_router(slider.router)
api_router.include_router(profile.router)
