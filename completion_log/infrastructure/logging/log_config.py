"""Centralized logging configuration.

Applies per-category log levels from Settings so that noisy loggers
(e.g. httpx/httpcore) can be silenced without hiding the completion
diagnostics.

Success diagnostics go to stdout, failures to stderr.

Usage:
    from completion_log import setup_logging
    setup_logging()   # Call once at startup
"""

import logging
import sys

from completion_log.config import Settings, get_settings


# ── Logger-name → Settings-field mapping ────────────────────────────

_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level": [
        "completion_log",
    ],
    "log_level_http": [
        "httpx",
        "httpcore",
    ],
}

_FORMAT = "%(levelname)-8s %(name)s — %(message)s"


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below the given level."""

    def __init__(self, level: int):
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


def setup_logging(settings: Settings | None = None) -> None:
    """Configure Python logging levels from library settings.

    Installs the stdout/stderr handler pair on the root logger only when it
    has no handlers yet, so host applications keep their own setup.
    """
    settings = settings or get_settings()

    root = logging.getLogger()
    if not root.handlers:
        formatter = logging.Formatter(_FORMAT)

        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(formatter)
        stdout_handler.addFilter(_BelowLevelFilter(logging.WARNING))
        root.addHandler(stdout_handler)

        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(formatter)
        stderr_handler.setLevel(logging.WARNING)
        root.addHandler(stderr_handler)

    # ── Per-category loggers ───────────────────────────────────────
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        level = _parse_level(raw_level)

        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured — completion_log=%s, http=%s",
        settings.log_level,
        settings.log_level_http,
    )


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
