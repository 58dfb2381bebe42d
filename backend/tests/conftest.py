"""Shared test fixtures."""

from __future__ import annotations

import pytest

from kuchisabishii.models.taste import BASIC_TASTES, TasteAxis, TasteVector


# Palate-tab example: five basic tastes on a 0-5 scale
BASIC_PROFILE = {
    TasteAxis.SWEET: 0.0,
    TasteAxis.SALTY: 5.0,
    TasteAxis.SOUR: 2.5,
    TasteAxis.BITTER: 0.0,
    TasteAxis.UMAMI: 5.0,
}

# 11-dimension profile on a 0-10 scale
ENHANCED_PROFILE = {
    TasteAxis.SWEET: 7.0,
    TasteAxis.SALTY: 6.5,
    TasteAxis.SOUR: 4.0,
    TasteAxis.BITTER: 2.0,
    TasteAxis.UMAMI: 8.5,
    TasteAxis.SPICY: 9.0,
    TasteAxis.CRUNCHY: 6.0,
    TasteAxis.CREAMY: 5.0,
    TasteAxis.CHEWY: 3.0,
    TasteAxis.HOT: 7.5,
    TasteAxis.COLD: 4.5,
}

BASIC_AXES_JSON = [
    {"label": "Sweet", "value": 0},
    {"label": "Salty", "value": 5},
    {"label": "Sour", "value": 2.5},
    {"label": "Bitter", "value": 0},
    {"label": "Umami", "value": 5},
]


@pytest.fixture
def basic_vector() -> TasteVector:
    return TasteVector.from_profile(BASIC_PROFILE, axes=BASIC_TASTES)


@pytest.fixture
def enhanced_vector() -> TasteVector:
    return TasteVector.from_profile(ENHANCED_PROFILE)
