"""Logging setup for applications embedding valuecast."""

from __future__ import annotations

import logging

from valuecast.core.config import EngineSettings, get_settings


def configure_logging(settings: EngineSettings | None = None) -> None:
    """Apply the configured log level to the root logger.

    The library itself only creates module loggers; calling this is left to
    the embedding application.
    """
    if settings is None:
        settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
