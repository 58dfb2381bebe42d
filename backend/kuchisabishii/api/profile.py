"""POST /api/profile/*: profile summary and comparison."""

from __future__ import annotations

import dataclasses
import logging

from fastapi import APIRouter, Depends

from kuchisabishii.api.errors import unprocessable
from kuchisabishii.config import Settings
from kuchisabishii.dependencies import get_settings
from kuchisabishii.engine import taste_vectors
from kuchisabishii.engine.config import get_preset
from kuchisabishii.engine.profile_summary import summarize_profile
from kuchisabishii.engine.radar_layout import RadarLayoutError
from kuchisabishii.models.requests import CompareRequest, ProfileSummaryRequest
from kuchisabishii.models.responses import CompareResponse, ProfileSummaryResponse
from kuchisabishii.models.taste import ALL_TASTES, TasteVector

router = APIRouter(prefix="/profile")
logger = logging.getLogger(__name__)


@router.post("/summary", response_model=ProfileSummaryResponse)
async def profile_summary(
    req: ProfileSummaryRequest,
    settings: Settings = Depends(get_settings),
) -> ProfileSummaryResponse:
    axes = req.axes or [a for a in ALL_TASTES if a in req.profile]
    vector = TasteVector.from_profile(req.profile, axes=axes)

    try:
        config = get_preset(req.preset or settings.default_radar_preset)
        summary = summarize_profile(vector, config, adventurousness=req.adventurousness)
    except (KeyError, RadarLayoutError) as e:
        raise unprocessable(e) from e

    return ProfileSummaryResponse(**dataclasses.asdict(summary))


@router.post("/compare", response_model=CompareResponse)
async def compare_profiles(req: CompareRequest) -> CompareResponse:
    a = taste_vectors.create_profile(req.a)
    b = taste_vectors.create_profile(req.b)
    result = CompareResponse(
        similarity=round(taste_vectors.similarity(a, b), 4),
        distance=round(taste_vectors.distance(a, b), 4),
    )
    logger.debug("Compared profiles: similarity=%s distance=%s", result.similarity, result.distance)
    return result
