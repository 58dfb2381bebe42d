"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from kuchisabishii.models.taste import AxisValue, TasteAxis


class RadarRequest(BaseModel):
    axes: list[AxisValue] = Field(..., description="Ordered axis values; order fixes vertex order")
    preset: str | None = Field(default=None, description="basic, onboarding or enhanced")
    center_x: float | None = Field(default=None, description="Override preset center x")
    center_y: float | None = Field(default=None, description="Override preset center y")
    radius: float | None = Field(default=None, description="Override preset radius")
    scale_min: float | None = Field(default=None, description="Override preset scale minimum")
    scale_max: float | None = Field(default=None, description="Override preset scale maximum")
    label_offset: float | None = Field(default=None, description="Override preset label offset")


class RadarSvgRequest(RadarRequest):
    title: str = Field(default="", description="SVG <title>")


class SliderPercentRequest(BaseModel):
    value: float
    scale_min: float = 0.0
    scale_max: float = 10.0


class SliderValueRequest(BaseModel):
    percent: float
    scale_min: float = 0.0
    scale_max: float = 10.0
    snap: bool = Field(default=False, description="Round to the configured slider step")


class ProfileSummaryRequest(BaseModel):
    profile: dict[TasteAxis, float] = Field(..., description="Axis → value in the preset's scale")
    axes: list[TasteAxis] | None = Field(
        default=None,
        description="Axes to chart, in order (default: the profile's axes in canonical order)",
    )
    preset: str | None = None
    adventurousness: float | None = None


class CompareRequest(BaseModel):
    a: dict[TasteAxis, float] = Field(..., description="First profile (0-10, missing axes default to 5)")
    b: dict[TasteAxis, float] = Field(..., description="Second profile (0-10, missing axes default to 5)")
