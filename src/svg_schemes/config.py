"""Settings read from the environment once, at import time."""

import logging
import os
from pathlib import Path

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def log_level(value: str | None, default: str = "WARNING") -> str:
    """Normalize a level name, falling back to `default` when it is unknown."""
    level = (value or "").strip().upper()
    if level not in _LEVELS:
        if level:
            logging.getLogger(__name__).warning(
                "Ignoring unknown log level %r, using %s", value, default
            )
        return default
    return level


OUTPUT_DIR = Path(os.environ.get("SVG_SCHEMES_OUTPUT_DIR", "previews"))
LOG_LEVEL = log_level(os.environ.get("SVG_SCHEMES_LOG_LEVEL"))
