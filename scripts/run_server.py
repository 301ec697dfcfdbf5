#!/usr/bin/env python3
"""Run the webhook receiver under uvicorn."""
from __future__ import annotations

import uvicorn

from forwarddate.config import get_settings
from forwarddate.utils.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)

settings = get_settings()


def main() -> None:
    """Serve the FastAPI app on the configured host and port."""
    logger.info("starting_server", host=settings.api_host, port=settings.api_port)
    uvicorn.run(
        "forwarddate.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
