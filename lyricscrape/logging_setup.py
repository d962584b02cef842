from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "lyricscrape"


def _env_level() -> int | None:
    level_name = os.getenv("LYRICSCRAPE_LOG_LEVEL", "").strip()
    if not level_name:
        return None
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else None


def setup_logging(debug: bool) -> None:
    """
    Log to stderr. Third-party loggers (requests, urllib3) stay at WARNING;
    --debug or LYRICSCRAPE_LOG_LEVEL only change the lyricscrape loggers.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    level = _env_level()
    if level is None:
        level = logging.DEBUG if debug else logging.WARNING
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
