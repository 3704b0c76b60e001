"""Shared helpers."""

from .formatting import SECTION_SIGN, strip_color_codes, translate_color_codes
from .log import configure_logging

__all__ = [
    "SECTION_SIGN",
    "configure_logging",
    "strip_color_codes",
    "translate_color_codes",
]
