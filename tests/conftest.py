"""Shared test fixtures."""

import json

import pytest

from bandchart.models import OHLCV

T0 = 1704067200000
DAY = 86_400_000


def make_bars(closes: list[float], t0: int = T0, step: int = DAY) -> list[OHLCV]:
    """Bars whose close follows *closes*; other fields derived from it."""
    return [
        OHLCV(
            time=t0 + i * step,
            open=c - 0.5,
            high=c + 1.0,
            low=c - 1.0,
            close=c,
            volume=1000.0 + i,
        )
        for i, c in enumerate(closes)
    ]


@pytest.fixture
def five_bars() -> list[OHLCV]:
    """Closes 1..5, one day apart."""
    return make_bars([1.0, 2.0, 3.0, 4.0, 5.0])


@pytest.fixture
def ohlcv_file(tmp_path):
    """JSON file holding 30 bars in the format the chart front end loads."""
    bars = make_bars([100.0 + (i % 6) * 1.5 - (i % 4) for i in range(30)])
    p = tmp_path / "ohlcv.json"
    p.write_text(json.dumps([bar.model_dump() for bar in bars]))
    return p
