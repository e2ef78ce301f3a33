"""
Central logging setup for exactint.

The library is silent by default: the package logger carries a NullHandler
and applications opt in through ``setup_logging``.

Usage:
    from exactint.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("Promoting operand", extra={"extra_info": {"digits": 3}})
"""

import logging
import sys
from typing import Dict, Optional

PACKAGE_LOGGER_NAME: str = "exactint"

DEFAULT_LOG_LEVEL: int = logging.WARNING


class ExactIntLogFormatter(logging.Formatter):
    """
    Formatter producing ``[TIMESTAMP] [LEVEL] [COMPONENT] MESSAGE``.

    Appends ``key=value`` pairs when the record carries an ``extra_info`` dict.
    """

    def __init__(self, include_extra: bool = True) -> None:
        self.include_extra: bool = include_extra
        fmt = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        log_message = super().format(record)

        extra_info: Optional[Dict[str, object]] = getattr(record, "extra_info", None)
        if self.include_extra and extra_info:
            extra_str = " | ".join(f"{k}={v}" for k, v in extra_info.items())
            log_message = f"{log_message} | {extra_str}"

        return log_message


logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module of the package.

    Args:
        name: usually ``__name__``; names outside the package are nested under it

    Returns:
        logging.Logger
    """
    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: int = DEFAULT_LOG_LEVEL, stream=None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: log level for the package logger and its handler
        stream: target stream (default: sys.stderr)

    Returns:
        the configured package logger
    """
    root = logging.getLogger(PACKAGE_LOGGER_NAME)

    for handler in list(root.handlers):
        if getattr(handler, "_exactint_console", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ExactIntLogFormatter())
    handler._exactint_console = True  # type: ignore[attr-defined]

    root.addHandler(handler)
    root.setLevel(level)
    return root
