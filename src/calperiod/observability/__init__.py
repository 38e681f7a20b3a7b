"""Observability module for calperiod.

Provides loguru based logging.
"""

from .loguru_config import configure_loguru, get_logger

__all__ = [
    "configure_loguru",
    "get_logger",
]
