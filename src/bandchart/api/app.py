"""FastAPI application serving candles and Bollinger Bands to the chart."""

import os
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from bandchart.chart import build_overlays, price_summary
from bandchart.config import AppConfig, load_config
from bandchart.data import load_ohlcv
from bandchart.errors import InvalidConfiguration
from bandchart.indicators import compute_bollinger_bands
from bandchart.models import OHLCV, BandPoint, BollingerInputs, BollingerSettings, SettingsBuilder

logger = structlog.get_logger("bandchart.api")


def _bands_or_422(series: list[OHLCV], inputs: BollingerInputs) -> list[BandPoint]:
    try:
        return compute_bollinger_bands(series, inputs)
    except InvalidConfiguration as e:
        logger.warning("indicator_config_rejected", error=str(e), length=inputs.length)
        raise HTTPException(status_code=422, detail=str(e)) from e


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Build the app around one loaded OHLCV series.

    With no *config*, reads the YAML file named by ``BANDCHART_CONFIG``.
    """
    if config is None:
        config = load_config(os.environ.get("BANDCHART_CONFIG"))
    series = load_ohlcv(config.data_path)

    app = FastAPI(
        title="Bollinger Chart API",
        description="OHLCV candles and Bollinger Bands overlays for the chart viewer",
        version="0.1.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.config = config
    app.state.series = series

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.get("/api/ohlcv")
    async def get_ohlcv():
        """All bars plus the price header figures."""
        summary = price_summary(series)
        return {
            "bars": [bar.model_dump() for bar in series],
            "summary": summary.model_dump() if summary else None,
        }

    @app.get("/api/settings/default")
    async def get_default_settings():
        return config.indicator.model_dump(mode="json")

    @app.get("/api/bollinger")
    async def get_bollinger(
        length: int | None = None,
        multiplier: float | None = None,
        offset: int | None = None,
        source: str | None = None,
    ):
        """Band series for ad-hoc inputs; omitted params use the configured defaults."""
        builder = SettingsBuilder(config.indicator)
        try:
            if length is not None:
                builder.length(length)
            if multiplier is not None:
                builder.multiplier(multiplier)
            if offset is not None:
                builder.offset(offset)
            if source is not None:
                builder.source(source)
            inputs = builder.build().inputs
        except InvalidConfiguration as e:
            logger.warning("indicator_config_rejected", error=str(e), source=source)
            raise HTTPException(status_code=422, detail=str(e)) from e

        bands = _bands_or_422(series, inputs)
        return {
            "inputs": inputs.model_dump(mode="json"),
            "bands": [p.model_dump() for p in bands],
        }

    @app.post("/api/bollinger")
    async def post_bollinger(settings: BollingerSettings):
        """Commit a full settings value and return bands with chart overlays."""
        bands = _bands_or_422(series, settings.inputs)
        return {
            "settings": settings.model_dump(mode="json"),
            "bands": [p.model_dump() for p in bands],
            "overlays": build_overlays(bands, settings.style),
        }

    logger.info("app_created", bars=len(series), data_path=config.data_path)
    return app


def __getattr__(name: str):
    # ``app`` is built on first access (``uvicorn bandchart.api.app:app``) so
    # importing create_app does no config or data I/O.
    if name == "app":
        instance = create_app()
        globals()["app"] = instance
        return instance
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
