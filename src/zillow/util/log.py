"""Logging utilities for the Zillow client.

loguru carries every record: the client's request/response trace at DEBUG,
failed calls at ERROR. Only the sink installed by ``configure_logging`` is
active; loguru's built-in stderr handler is dropped so that a library user
who configures nothing does not see DEBUG traffic.

Usage:
    from zillow.util.log import configure_logging, get_logger

    configure_logging(level="DEBUG", intercept_transport=True)
    log = get_logger("zillow-client")
    log.info("Hello")
"""

from __future__ import annotations

import contextlib
import logging
import sys
from typing import Any

from loguru import logger as _logger

# loguru installs this handler (stderr, DEBUG) on import
_DEFAULT_HANDLER_ID = 0

# stdlib loggers used by the HTTP transport
TRANSPORT_LOGGERS = ("httpx", "httpcore")

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

_HANDLER_IDS: list[int] = []
_CONFIGURED: bool = False


class _InterceptHandler(logging.Handler):
    """Forward httpx/httpcore records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        _logger.bind(logger_name=record.name).opt(
            depth=depth, exception=record.exc_info
        ).log(level, record.getMessage())


def configure_logging(
    *,
    level: str = "WARNING",
    sink: Any = None,
    intercept_transport: bool = False,
) -> None:
    """Install the single log sink.

    Safe to call multiple times; the previous sink is removed.

    Args:
        level: Minimum level, "DEBUG" shows every request and response.
        sink: Anything loguru accepts as a sink (defaults to stderr).
        intercept_transport: Route httpx/httpcore logging into the sink.
    """

    global _CONFIGURED

    shutdown_logging()

    with contextlib.suppress(ValueError):
        _logger.remove(_DEFAULT_HANDLER_ID)

    # Default extra fields so the format never raises KeyError.
    _logger.configure(extra={"logger_name": "-"})

    _HANDLER_IDS.append(
        _logger.add(
            sys.stderr if sink is None else sink,
            level=level,
            format=LOG_FORMAT,
            diagnose=False,
        )
    )

    if intercept_transport:
        for name in TRANSPORT_LOGGERS:
            transport_logger = logging.getLogger(name)
            transport_logger.handlers = [_InterceptHandler()]
            transport_logger.setLevel(level)
            transport_logger.propagate = False

    _CONFIGURED = True


def get_logger(logger_name: str | None = None, /, **extra: Any):
    """Get a loguru logger bound with ``logger_name`` and extra context."""

    if not _CONFIGURED:
        configure_logging()

    bound = _logger
    if logger_name is not None:
        bound = bound.bind(logger_name=logger_name)

    if extra:
        bound = bound.bind(**extra)

    return bound


def shutdown_logging() -> None:
    """Remove the installed sink and release the transport loggers."""

    global _CONFIGURED

    for handler_id in _HANDLER_IDS:
        # Already removed elsewhere, e.g. by logger.remove().
        with contextlib.suppress(ValueError):
            _logger.remove(handler_id)
    _HANDLER_IDS.clear()

    for name in TRANSPORT_LOGGERS:
        transport_logger = logging.getLogger(name)
        transport_logger.handlers = [
            handler
            for handler in transport_logger.handlers
            if not isinstance(handler, _InterceptHandler)
        ]
        transport_logger.propagate = True

    _CONFIGURED = False
