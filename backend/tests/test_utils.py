"""Tests for color and numeric helpers."""

import math

import pytest

from kittenstudio.utils.color import hex_to_rgb, is_hex_color, mix_hex, rgb_to_hex
from kittenstudio.utils.math_helpers import clamp, clamp01, lerp


def test_hex_round_trip():
    assert hex_to_rgb("#ff8A4c") == (255, 138, 76)
    assert rgb_to_hex(255, 138, 76) == "#ff8a4c"


@pytest.mark.parametrize("value", ["#abc", "ff8a4c", "#ff8a4g", " #ff8a4c", 0xFF8A4C, None])
def test_is_hex_color_rejects(value):
    assert not is_hex_color(value)


def test_mix_hex_endpoints():
    assert mix_hex("#000000", "#ffffff", 0) == "#000000"
    assert mix_hex("#000000", "#ffffff", 1) == "#ffffff"
    assert mix_hex("#000000", "#ffffff", 0.5) == "#808080"


def test_lerp():
    assert lerp(10, 20, 0.25) == 12.5


@pytest.mark.parametrize(
    "value, expected",
    [(-1, 0.0), (0.3, 0.3), (7, 1.0), (math.nan, 0.0), (math.inf, 0.0), (-math.inf, 0.0), ("x", 0.0), (None, 0.0)],
)
def test_clamp01_is_total(value, expected):
    assert clamp01(value) == expected


def test_clamp_bounds():
    assert clamp(-25, -20, 20) == -20.0
    assert clamp(25, -20, 20) == 20.0
    assert clamp(math.nan, -20, 20) == -20.0
