"""Technical indicators — pure functions on OHLCV series."""

from bandchart.indicators.bollinger import (
    SOURCE_SELECTORS,
    compute_bollinger_bands,
    select_source,
)
from bandchart.models.settings import parse_source

__all__ = ["SOURCE_SELECTORS", "compute_bollinger_bands", "parse_source", "select_source"]
