"""Logging configuration for the statistics service."""

import logging
import sys
from typing import Optional

from .config import get_settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure standard logging to stdout with a consistent format."""

    resolved = (level or get_settings().log_level or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, resolved, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


__all__ = ["configure_logging"]
