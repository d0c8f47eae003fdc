"""Command-line entry point: serve the showroom with uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from showroom_lite.entrypoints.http.app import build_app
from showroom_lite.infra.config import load_settings
from showroom_lite.infra.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    logger.info("Serving showroom", extra={"host": settings.host, "port": settings.port})
    uvicorn.run(
        build_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
