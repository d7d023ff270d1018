"""Market data models — candles, band points, price header."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class OHLCV(BaseModel):
    """One candlestick bar, keyed by an integer timestamp."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    time: int
    open: float
    high: float
    low: float
    close: float
    volume: float


class BandPoint(BaseModel):
    """One Bollinger Bands output sample.

    ``None`` marks a value that is not computable (warm-up or shifted out of
    range). It serialises to JSON ``null`` so the chart leaves a gap.
    """

    model_config = ConfigDict(frozen=True)

    time: int
    basis: float | None = None
    upper: float | None = None
    lower: float | None = None

    @property
    def is_defined(self) -> bool:
        return self.basis is not None and self.upper is not None and self.lower is not None


class PriceSummary(BaseModel):
    """Latest price figures shown in the chart header."""

    time: int
    price: float
    change: float | None = None
    change_pct: float | None = None
    volume: float
