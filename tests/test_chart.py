"""Tests for chart overlay payloads and the price header."""

import pytest

from bandchart.chart import build_overlays, fill_color, price_summary
from bandchart.indicators import compute_bollinger_bands
from bandchart.models import BollingerInputs, BollingerStyle, SettingsBuilder

from conftest import make_bars


@pytest.fixture
def bands(five_bars):
    return compute_bollinger_bands(five_bars, BollingerInputs(length=3))


def _by_id(overlays):
    return {o["id"]: o for o in overlays}


class TestBuildOverlays:
    def test_default_style_has_three_lines_and_fill(self, bands):
        overlays = build_overlays(bands, BollingerStyle())
        assert [o["id"] for o in overlays] == ["bb_upper", "bb_basis", "bb_lower", "bb_fill"]

    def test_line_styles_passed_through(self, bands):
        style = SettingsBuilder().line("upper", color="#123456", width=3, style="dashed").build().style
        upper = _by_id(build_overlays(bands, style))["bb_upper"]
        assert upper["name"] == "polyline"
        assert upper["styles"]["line"] == {"style": "dashed", "color": "#123456", "size": 3}

    def test_undefined_points_skipped(self, bands, five_bars):
        basis = _by_id(build_overlays(bands, BollingerStyle()))["bb_basis"]
        assert basis["points"] == [
            {"timestamp": five_bars[2].time, "value": 2.0},
            {"timestamp": five_bars[3].time, "value": 3.0},
            {"timestamp": five_bars[4].time, "value": 4.0},
        ]

    def test_hidden_lines_omitted(self, bands):
        style = (
            SettingsBuilder()
            .line("basis", visible=False)
            .line("lower", visible=False)
            .background(visible=False)
            .build()
            .style
        )
        assert [o["id"] for o in build_overlays(bands, style)] == ["bb_upper"]

    def test_fill_pairs_upper_and_lower(self, bands):
        fill = _by_id(build_overlays(bands, BollingerStyle()))["bb_fill"]
        assert fill["styles"]["polygon"]["color"] == "rgba(16, 185, 129, 0.12)"
        assert len(fill["points"]) == 3
        first = fill["points"][0]
        assert first["upper"] == bands[2].upper
        assert first["lower"] == bands[2].lower

    def test_all_undefined_gives_empty_points(self, five_bars):
        bands = compute_bollinger_bands(five_bars, BollingerInputs(length=10))
        for overlay in build_overlays(bands, BollingerStyle()):
            assert overlay["points"] == []


class TestFillColor:
    def test_conversion(self):
        assert fill_color("#FF0080", 0.5) == "rgba(255, 0, 128, 0.5)"
        assert fill_color("#000000", 1.0) == "rgba(0, 0, 0, 1)"


class TestPriceSummary:
    def test_empty(self):
        assert price_summary([]) is None

    def test_single_bar(self):
        summary = price_summary(make_bars([10.0]))
        assert summary.price == 10.0
        assert summary.change is None
        assert summary.change_pct is None

    def test_change_vs_previous(self):
        bars = make_bars([8.0, 10.0, 12.0])
        summary = price_summary(bars)
        assert summary.time == bars[-1].time
        assert summary.price == 12.0
        assert summary.change == 2.0
        assert summary.change_pct == pytest.approx(20.0)
        assert summary.volume == bars[-1].volume

    def test_previous_close_zero(self):
        summary = price_summary(make_bars([0.0, 3.0]))
        assert summary.change == 3.0
        assert summary.change_pct is None
