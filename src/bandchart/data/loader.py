"""OHLCV loader — reads a JSON array of bars and checks ordering."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import structlog
from pydantic import TypeAdapter

from bandchart.errors import SeriesError
from bandchart.models import OHLCV

log = structlog.get_logger("bandchart.data")

_SERIES_ADAPTER = TypeAdapter(list[OHLCV])


def default_data_path() -> Path:
    """Sample series bundled with the package."""
    return Path(__file__).with_name("ohlcv.json")


def validate_series(series: Sequence[OHLCV]) -> None:
    """Raise :class:`SeriesError` unless ``time`` is strictly increasing."""
    for prev, bar in zip(series, series[1:]):
        if bar.time <= prev.time:
            kind = "duplicate" if bar.time == prev.time else "out-of-order"
            raise SeriesError(f"{kind} timestamp {bar.time} after {prev.time}")


def load_ohlcv(path: str | Path | None = None) -> list[OHLCV]:
    """Load bars from *path* (the bundled sample if None).

    The file must hold a JSON array of ``{time, open, high, low, close, volume}``
    records sorted by ``time``.
    """
    p = Path(path) if path is not None else default_data_path()
    with open(p) as f:
        raw = json.load(f)
    series = _SERIES_ADAPTER.validate_python(raw)
    validate_series(series)
    log.info("ohlcv_loaded", path=str(p), bars=len(series))
    return series
