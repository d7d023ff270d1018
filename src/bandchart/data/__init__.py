"""OHLCV series loading."""

from bandchart.data.loader import default_data_path, load_ohlcv, validate_series

__all__ = ["default_data_path", "load_ohlcv", "validate_series"]
