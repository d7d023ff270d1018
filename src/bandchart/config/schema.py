"""Configuration schema — Pydantic models for config.yaml."""

from __future__ import annotations

from pydantic import BaseModel, Field

from bandchart.models import BollingerSettings


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "json"


class ApiConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class AppConfig(BaseModel):
    # None -> sample series bundled with the package
    data_path: str | None = None
    indicator: BollingerSettings = Field(default_factory=BollingerSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
