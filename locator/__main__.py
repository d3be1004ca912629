"""Run the locator service: ``python -m locator``."""
import logging

import uvicorn

from locator.app import app
from locator.core.config import get_settings

logger = logging.getLogger("locator")

UVICORN_LOG_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}
LOG_LEVEL_ALIASES = {"warn": "warning", "fatal": "critical"}


def uvicorn_log_level(level: str | None) -> str:
    """Translate a LOG_LEVEL setting into a name uvicorn accepts, else "info"."""
    name = (level or "").strip().lower()
    name = LOG_LEVEL_ALIASES.get(name, name)
    return name if name in UVICORN_LOG_LEVELS else "info"


def main() -> None:
    settings = get_settings()
    logger.info("========================================")
    logger.info("%s", settings.company_name)
    logger.info("Warehouse Sparepart Locator")
    logger.info("Server running at: http://localhost:%s", settings.port)
    logger.info("========================================")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=uvicorn_log_level(settings.log_level))


if __name__ == "__main__":
    main()
