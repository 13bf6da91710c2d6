"""Logging setup for applications embedding the SDK.

``wasender`` emits its records through loguru and disables them on import,
so a library user sees nothing unless they opt in.  ``setup_logging`` is the
opt-in: one stderr sink (human-readable or JSON lines), SDK records enabled,
and stdlib loggers (uvicorn, httpx, ...) forwarded to the same sink.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

QUIET_LOGGERS: tuple[str, ...] = ("uvicorn.access", "httpx", "httpcore")
"""Stdlib loggers capped at WARNING; they log every request."""


class _InterceptHandler(logging.Handler):
    """Forward stdlib records to loguru, keeping the original call site."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(
    level: str = "INFO",
    *,
    json_logs: bool = False,
    quiet: Iterable[str] = QUIET_LOGGERS,
) -> None:
    """Install the stderr sink and enable ``wasender`` records.

    ``json_logs`` switches the sink to one JSON object per line.  Loggers
    named in ``quiet`` only pass WARNING and above.  Replaces any sinks added
    before; call once at process startup.
    """
    level = level.upper()

    logger.remove()
    if json_logs:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)
    logger.enable("wasender")

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug("Logging configured (level={}, json={})", level, json_logs)
