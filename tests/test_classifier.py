"""
Tests for metric-to-color classification.
"""

import math

import pytest

from vessel_trail.models.trail import TrailMetric
from vessel_trail.trail.classifier import ColorBand, classify, hex_to_rgba, legend


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ColorBand.GREEN),
        (0, ColorBand.GREEN),
        (105.99, ColorBand.GREEN),
        (106, ColorBand.AMBER),
        (113.9, ColorBand.AMBER),
        (114, ColorBand.RED),
        (250, ColorBand.RED),
    ],
)
def test_power_bands(value, expected):
    assert classify(TrailMetric.POWER, value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ColorBand.RED),
        (4.99, ColorBand.GREEN),
        (5, ColorBand.AMBER),
        (14.9, ColorBand.AMBER),
        (15, ColorBand.RED),
    ],
)
def test_consumption_bands(value, expected):
    assert classify(TrailMetric.CONSUMPTION, value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ColorBand.AMBER),
        (102.9, ColorBand.GREEN),
        (103, ColorBand.AMBER),
        (109.9, ColorBand.AMBER),
        (110, ColorBand.RED),
    ],
)
def test_sfoc_bands_when_visible(value, expected):
    assert classify(TrailMetric.SFOC, value, sfoc_visible=True) == expected


@pytest.mark.parametrize("value", [None, 50, 105, 200])
def test_sfoc_hidden_falls_back_to_default(value):
    assert classify(TrailMetric.SFOC, value, sfoc_visible=False) == ColorBand.DEFAULT


@pytest.mark.parametrize("value", [None, 0, 120, float("nan")])
def test_none_metric_is_always_default(value):
    assert classify(TrailMetric.NONE, value) == ColorBand.DEFAULT


def test_metric_accepts_plain_string():
    assert classify("power", 120) == ColorBand.RED


@pytest.mark.parametrize("value", [float("nan"), math.inf, -math.inf])
def test_non_finite_values_use_missing_band(value):
    assert classify(TrailMetric.POWER, value) == ColorBand.GREEN
    assert classify(TrailMetric.CONSUMPTION, value) == ColorBand.RED
    assert classify(TrailMetric.SFOC, value, sfoc_visible=True) == ColorBand.AMBER


def test_band_colors():
    assert ColorBand.GREEN.hex == "#00FF00"
    assert ColorBand.AMBER.hex == "#FFAC1C"
    assert ColorBand.RED.hex == "#FF0000"
    assert ColorBand.DEFAULT.hex == "#0000FF"
    assert ColorBand.AMBER.rgba() == [255, 172, 28, 255]


def test_hex_to_rgba_short_form():
    assert hex_to_rgba("#0F0", 0.5) == [0, 255, 0, 127]


def test_legend_rows():
    assert legend(TrailMetric.NONE) == [(ColorBand.DEFAULT, "Trail")]

    power = legend(TrailMetric.POWER)
    assert [band for band, _ in power] == [ColorBand.GREEN, ColorBand.AMBER, ColorBand.RED]
    assert power[0][1] == "< 106"
    assert power[2][1] == "≥ 114"

    sfoc = legend(TrailMetric.SFOC)
    assert sfoc[-1][0] == ColorBand.DEFAULT
