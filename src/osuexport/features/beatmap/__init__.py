"""Summary: Beatmap descriptor feature exports.
Why: Offer locator and parser helpers from one import path.
"""

from .usecases.locator import find_descriptor
from .usecases.parser import parse_descriptor

__all__ = ["find_descriptor", "parse_descriptor"]
