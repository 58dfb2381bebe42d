"""Taste axes and taste vectors.

Axis identity is the ``TasteAxis`` enum. Display labels and colours come from
``AXIS_INFO`` and never feed back into lookups.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from pydantic import BaseModel, Field


class TasteAxis(str, enum.Enum):
    SWEET = "sweet"
    SALTY = "salty"
    SOUR = "sour"
    BITTER = "bitter"
    UMAMI = "umami"
    SPICY = "spicy"
    CRUNCHY = "crunchy"
    CREAMY = "creamy"
    CHEWY = "chewy"
    HOT = "hot"
    COLD = "cold"


class AxisCategory(str, enum.Enum):
    BASIC = "basic"
    TEXTURE = "texture"
    TEMPERATURE = "temperature"


@dataclass(frozen=True)
class AxisInfo:
    label: str
    color: str
    category: AxisCategory


AXIS_INFO: dict[TasteAxis, AxisInfo] = {
    TasteAxis.SWEET: AxisInfo("Sweet", "#ec4899", AxisCategory.BASIC),
    TasteAxis.SALTY: AxisInfo("Salty", "#3b82f6", AxisCategory.BASIC),
    TasteAxis.SOUR: AxisInfo("Sour", "#f59e0b", AxisCategory.BASIC),
    TasteAxis.BITTER: AxisInfo("Bitter", "#10b981", AxisCategory.BASIC),
    TasteAxis.UMAMI: AxisInfo("Umami", "#8b5cf6", AxisCategory.BASIC),
    TasteAxis.SPICY: AxisInfo("Spicy", "#ef4444", AxisCategory.BASIC),
    TasteAxis.CRUNCHY: AxisInfo("Crunchy", "#f97316", AxisCategory.TEXTURE),
    TasteAxis.CREAMY: AxisInfo("Creamy", "#06b6d4", AxisCategory.TEXTURE),
    TasteAxis.CHEWY: AxisInfo("Chewy", "#84cc16", AxisCategory.TEXTURE),
    TasteAxis.HOT: AxisInfo("Hot", "#dc2626", AxisCategory.TEMPERATURE),
    TasteAxis.COLD: AxisInfo("Cold", "#0ea5e9", AxisCategory.TEMPERATURE),
}

# 5-axis basic-taste chart
BASIC_TASTES: tuple[TasteAxis, ...] = (
    TasteAxis.SWEET,
    TasteAxis.SALTY,
    TasteAxis.SOUR,
    TasteAxis.BITTER,
    TasteAxis.UMAMI,
)

# 11-dimension chart, canonical order
ALL_TASTES: tuple[TasteAxis, ...] = tuple(TasteAxis)

DEFAULT_COLOR = "#a855f7"


class AxisValue(BaseModel):
    """One spoke of a radar chart."""

    label: str
    value: float
    color: str = DEFAULT_COLOR
    axis: TasteAxis | None = None

    @classmethod
    def for_axis(cls, axis: TasteAxis, value: float) -> AxisValue:
        info = AXIS_INFO[axis]
        return cls(label=info.label, value=value, color=info.color, axis=axis)


class TasteVector(BaseModel):
    """Ordered list of axis values. Order fixes polygon vertex order."""

    axes: list[AxisValue] = Field(default_factory=list)

    @classmethod
    def from_profile(
        cls,
        profile: Mapping[TasteAxis | str, float],
        axes: Sequence[TasteAxis] = ALL_TASTES,
    ) -> TasteVector:
        """Build a vector from a profile mapping. Missing axes read as 0."""
        keyed = {TasteAxis(k): float(v) for k, v in profile.items()}
        return cls(axes=[AxisValue.for_axis(a, keyed.get(a, 0.0)) for a in axes])

    def to_profile(self) -> dict[TasteAxis, float]:
        return {a.axis: a.value for a in self.axes if a.axis is not None}

    def values(self) -> list[float]:
        return [a.value for a in self.axes]

    def labels(self) -> list[str]:
        return [a.label for a in self.axes]

    def with_value(self, axis: TasteAxis, value: float) -> TasteVector:
        """Return a copy with one axis replaced. Raises KeyError if axis is absent."""
        if not any(a.axis == axis for a in self.axes):
            raise KeyError(axis)
        return TasteVector(
            axes=[
                a.model_copy(update={"value": value}) if a.axis == axis else a
                for a in self.axes
            ]
        )

    def __len__(self) -> int:
        return len(self.axes)
