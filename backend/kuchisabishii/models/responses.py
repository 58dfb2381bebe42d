"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from kuchisabishii.engine.radar_layout import RadarLayout


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    axes_registered: int = 0


class AxisMeta(BaseModel):
    axis: str
    label: str
    color: str
    category: str


class AxesResponse(BaseModel):
    axes: list[AxisMeta] = Field(default_factory=list)
    presets: list[str] = Field(default_factory=list)


class LayoutResponse(BaseModel):
    center: tuple[float, float]
    radius: float
    angles: list[float]
    axis_anchor_points: list[tuple[float, float]]
    data_points: list[tuple[float, float]]
    label_points: list[tuple[float, float]]
    polygon: list[tuple[float, float]]

    @classmethod
    def from_layout(cls, layout: RadarLayout) -> LayoutResponse:
        return cls(
            center=layout.center,
            radius=layout.radius,
            angles=list(layout.angles),
            axis_anchor_points=list(layout.axis_anchor_points),
            data_points=list(layout.data_points),
            label_points=list(layout.label_points),
            polygon=layout.polygon(),
        )


class SvgResponse(BaseModel):
    svg: str


class SliderPercentResponse(BaseModel):
    percent: float


class SliderValueResponse(BaseModel):
    value: float


class ProfileSummaryResponse(BaseModel):
    overall_intensity: float
    intensity_percent: float
    dominant_axis: str
    top_axes: list[tuple[str, float]] = Field(default_factory=list)
    category_means: dict[str, float] = Field(default_factory=dict)
    coverage: float = 0.0
    personality: str = ""


class CompareResponse(BaseModel):
    similarity: float
    distance: float
