"""Taste vector maths over the 11-dimension profile space (0-10 per axis)."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

import numpy as np
from numpy.typing import NDArray

from kuchisabishii.models.taste import ALL_TASTES, TasteAxis
from kuchisabishii.utils.math_helpers import clamp, weighted_mean

logger = logging.getLogger(__name__)

Profile = dict[TasteAxis, float]

PROFILE_MIN = 0.0
PROFILE_MAX = 10.0
DEFAULT_VALUE = 5.0

# Texture and temperature pull less than flavour; umami slightly more.
DIMENSION_WEIGHTS: dict[TasteAxis, float] = {
    TasteAxis.SWEET: 1.0,
    TasteAxis.SALTY: 1.0,
    TasteAxis.SOUR: 0.9,
    TasteAxis.BITTER: 0.8,
    TasteAxis.UMAMI: 1.1,
    TasteAxis.SPICY: 1.0,
    TasteAxis.CRUNCHY: 0.7,
    TasteAxis.CREAMY: 0.7,
    TasteAxis.CHEWY: 0.6,
    TasteAxis.HOT: 0.8,
    TasteAxis.COLD: 0.8,
}

_WEIGHTS = np.array([DIMENSION_WEIGHTS[a] for a in ALL_TASTES])


def create_profile(partial: Mapping[TasteAxis | str, float] | None = None) -> Profile:
    """Full profile with defaults, provided values clamped into [0, 10]. Unknown keys are ignored."""
    profile = {axis: DEFAULT_VALUE for axis in ALL_TASTES}
    for key, value in (partial or {}).items():
        try:
            axis = TasteAxis(key)
        except ValueError:
            logger.debug("Ignoring unknown taste axis %r", key)
            continue
        profile[axis] = clamp(float(value), PROFILE_MIN, PROFILE_MAX)
    return profile


def as_array(profile: Mapping[TasteAxis, float]) -> NDArray[np.float64]:
    return np.array([profile[a] for a in ALL_TASTES], dtype=np.float64)


def from_array(values: NDArray[np.float64]) -> Profile:
    return {a: float(v) for a, v in zip(ALL_TASTES, values)}


def similarity(a: Mapping[TasteAxis, float], b: Mapping[TasteAxis, float]) -> float:
    """Weighted cosine similarity in [0, 1]. 0 if either vector is all zeros."""
    wa = as_array(a) * _WEIGHTS
    wb = as_array(b) * _WEIGHTS
    mag_a = float(np.linalg.norm(wa))
    mag_b = float(np.linalg.norm(wb))
    if mag_a == 0 or mag_b == 0:
        return 0.0
    return clamp(float(np.dot(wa, wb)) / (mag_a * mag_b), 0.0, 1.0)


def distance(a: Mapping[TasteAxis, float], b: Mapping[TasteAxis, float]) -> float:
    """Weighted Euclidean distance, sqrt(Σ w·Δ²)."""
    diff = as_array(a) - as_array(b)
    return float(np.sqrt(np.sum(_WEIGHTS * diff**2)))


def weighted_average(
    profiles: Sequence[Mapping[TasteAxis, float]],
    weights: Sequence[float],
) -> Profile:
    if not profiles:
        return create_profile()
    if len(weights) != len(profiles):
        raise ValueError(
            f"weights length {len(weights)} does not match profiles length {len(profiles)}"
        )
    w = np.asarray(weights, dtype=np.float64)
    if float(np.sum(w)) == 0:
        return create_profile()

    stacked = np.vstack([as_array(p) for p in profiles])
    return {axis: weighted_mean(stacked[:, i], w) for i, axis in enumerate(ALL_TASTES)}


def normalize(profile: Mapping[TasteAxis, float]) -> Profile:
    values = as_array(profile)
    magnitude = float(np.linalg.norm(values))
    if magnitude == 0:
        return dict(profile)
    return from_array(values / magnitude)
