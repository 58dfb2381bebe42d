"""Tests for slider ↔ value mapping."""

from __future__ import annotations

import pytest

from kuchisabishii.engine.radar_layout import InvalidScale
from kuchisabishii.engine.slider import slider_percent_to_value, snap_to_step, value_to_slider_percent


def test_value_to_percent():
    assert value_to_slider_percent(7, 0, 10) == 70
    assert value_to_slider_percent(0, 0, 10) == 0
    assert value_to_slider_percent(10, 0, 10) == 100
    assert value_to_slider_percent(2.5, 0, 5) == 50


def test_percent_to_value():
    assert slider_percent_to_value(70, 0, 10) == 7
    assert slider_percent_to_value(0, 1, 10) == 1
    assert slider_percent_to_value(100, 1, 10) == 10


@pytest.mark.parametrize("lo,hi", [(0.0, 5.0), (0.0, 10.0), (1.0, 10.0), (-3.0, 3.0)])
def test_round_trip(lo, hi):
    steps = 37
    for i in range(steps + 1):
        value = lo + (hi - lo) * i / steps
        percent = value_to_slider_percent(value, lo, hi)
        assert slider_percent_to_value(percent, lo, hi) == pytest.approx(value)


def test_no_clamping():
    assert value_to_slider_percent(12, 0, 10) == pytest.approx(120)
    assert slider_percent_to_value(-10, 0, 10) == pytest.approx(-1)


@pytest.mark.parametrize("lo,hi", [(5, 5), (10, 0)])
def test_invalid_scale(lo, hi):
    with pytest.raises(InvalidScale):
        value_to_slider_percent(1, lo, hi)
    with pytest.raises(InvalidScale):
        slider_percent_to_value(50, lo, hi)


def test_snap_to_step():
    assert snap_to_step(6.84, 0.1, 0, 10) == 6.8
    assert snap_to_step(6.86, 0.1, 0, 10) == 6.9
    assert snap_to_step(3.3, 0.5, 0, 5) == 3.5


def test_snap_is_anchored_at_min():
    assert snap_to_step(2.2, 1.0, 0.5, 5.5) == 2.5


def test_snap_clamps_into_scale():
    assert snap_to_step(12.0, 0.1, 0, 10) == 10
    assert snap_to_step(-0.4, 0.1, 0, 10) == 0


def test_snap_rejects_bad_step():
    with pytest.raises(ValueError):
        snap_to_step(1.0, 0.0, 0, 10)
