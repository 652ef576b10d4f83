"""Run the Albums API with uvicorn: python -m albums_api."""

import logging

import uvicorn

from albums_api.config import get_settings
from albums_api.infrastructure.observability import setup_logging

logger = logging.getLogger("albums_api")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Starting service on {settings.host}:{settings.port}")
    uvicorn.run(
        "albums_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
