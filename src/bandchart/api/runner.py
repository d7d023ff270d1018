"""FastAPI server runner."""

from __future__ import annotations

import structlog
import uvicorn

from bandchart.api.app import create_app
from bandchart.config import load_config
from bandchart.logging.setup import setup_logging

logger = structlog.get_logger("bandchart.runner")


def main(config_path: str | None = None) -> None:
    """Run the FastAPI server."""
    config = load_config(config_path)
    setup_logging(level=config.logging.level, log_format=config.logging.format)

    logger.info("Starting FastAPI server", host=config.api.host, port=config.api.port)

    try:
        uvicorn.run(
            create_app(config),
            host=config.api.host,
            port=config.api.port,
            log_config=None,  # Use our structlog setup
        )
    except Exception as e:
        logger.error("Failed to start server", error=str(e))
        raise


if __name__ == "__main__":
    main()
