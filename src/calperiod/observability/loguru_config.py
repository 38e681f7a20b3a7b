"""Loguru configuration for calperiod.

Library code only obtains component-bound loggers through ``get_logger``;
sinks are installed by the application (or the CLI) through
``configure_loguru``. Importing ``calperiod`` disables its loggers, so an
unconfigured application sees no output from the library.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from loguru import logger

__all__ = [
    "configure_loguru",
    "get_logger",
]


def configure_loguru(
    *,
    level: str = "INFO",
    log_file: Path | None = None,
    rotation: str = "100 MB",
    retention: str = "10 days",
    enable_console: bool = True,
) -> None:
    """Configure loguru with console output and an optional JSON log file.

    Parameters
    ----------
    level
        Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_file
        Structured JSON log file (one record per line)
    rotation
        Log rotation policy (e.g., "100 MB", "1 day")
    retention
        Log retention policy (e.g., "10 days", "1 week")
    enable_console
        Enable console output

    Example
    -------
    >>> from calperiod.observability.loguru_config import configure_loguru
    >>> configure_loguru(level="DEBUG")
    """
    # Remove default handler
    logger.remove()
    logger.enable("calperiod")
    logger.configure(extra={"component": "calperiod"})

    if enable_console:
        logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[component]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>",
            level=level,
            colorize=True,
            backtrace=True,
            diagnose=False,
        )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format="{message}",
            level=level,
            rotation=rotation,
            retention=retention,
            serialize=True,
            backtrace=True,
            diagnose=False,
        )

    logger.debug("Loguru configured", level=level, log_file=str(log_file) if log_file else None)


def get_logger(component: str = "calperiod") -> Any:
    """Get logger instance bound to specific component.

    Parameters
    ----------
    component
        Component name (calendar, periods, parsing, cli)

    Returns
    -------
    Logger
        Loguru logger bound to component
    """
    return logger.bind(component=component)
