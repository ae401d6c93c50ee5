"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helper, and the Rich handler.
Why: Provide a single canonical import path for logging.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import ExportRichHandler

__all__ = [
    "ExportRichHandler",
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
