"""Configuration system."""

from bandchart.config.loader import load_config
from bandchart.config.schema import AppConfig

__all__ = ["AppConfig", "load_config"]
