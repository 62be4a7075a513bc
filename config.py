"""Runtime settings and structured logging for the HTML cleaner.

Settings are read from the environment (optionally seeded from a ``.env``
file next to this module) every time ``load_settings()`` is called, so no
configuration is cached between documents.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent / ".env")

LOGGER_NAME = "htmlclean"

_LINE_BREAKS = {"lf": "\n", "crlf": "\r\n"}


@dataclass(frozen=True)
class Settings:
    """Environment-derived defaults for parsing and output formatting."""

    parser: str = "lxml"
    line_break: str = "\n"
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read ``HTMLCLEAN_*`` variables into a ``Settings`` instance.

    Raises:
        ValueError: If ``HTMLCLEAN_LINE_BREAK`` is not ``lf`` or ``crlf``.
    """
    raw_break = (os.getenv("HTMLCLEAN_LINE_BREAK") or "lf").strip().lower()
    if raw_break not in _LINE_BREAKS:
        raise ValueError(
            f"HTMLCLEAN_LINE_BREAK must be one of {sorted(_LINE_BREAKS)}, got {raw_break!r}"
        )
    return Settings(
        parser=(os.getenv("HTMLCLEAN_PARSER") or "lxml").strip(),
        line_break=_LINE_BREAKS[raw_break],
        log_level=(os.getenv("HTMLCLEAN_LOG_LEVEL") or "INFO").strip().upper(),
    )


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class StructuredFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("tag", "attr", "path", "removed", "passes", "chars"):
            val = getattr(record, key, None)
            if val is not None:
                log_data[key] = val
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a single JSON handler to the ``htmlclean`` logger.

    Safe to call repeatedly; only the level is refreshed on later calls.
    """
    settings = settings or load_settings()
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h.formatter, StructuredFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    logger.propagate = False
    return logger
