"""Run the HTTP server: python -m pm_api"""

import logging

import uvicorn

from pm_api.config import get_settings
from pm_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Serving pm-api on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "pm_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
