"""Configuration package."""

from osuexport.config.config import ExportConfig

__all__ = ["ExportConfig"]
