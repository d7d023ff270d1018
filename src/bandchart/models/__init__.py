"""Pydantic domain models."""

from bandchart.models.market import OHLCV, BandPoint, PriceSummary
from bandchart.models.settings import (
    BackgroundSettings,
    BollingerInputs,
    BollingerSettings,
    BollingerStyle,
    LineSettings,
    LineStyle,
    SettingsBuilder,
    Source,
)

__all__ = [
    "BackgroundSettings",
    "BandPoint",
    "BollingerInputs",
    "BollingerSettings",
    "BollingerStyle",
    "LineSettings",
    "LineStyle",
    "OHLCV",
    "PriceSummary",
    "SettingsBuilder",
    "Source",
]
