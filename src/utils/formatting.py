"""Colour-code helpers shared by the book compiler and the chat surfaces."""

from __future__ import annotations

import re

SECTION_SIGN = "§"
COLOR_CODES = "0123456789AaBbCcDdEeFfKkLlMmNnOoRrXx"

_STRIP_PATTERN = re.compile(SECTION_SIGN + "[0-9A-FK-ORXa-fk-orx]")


def translate_color_codes(text: str, marker: str = "&") -> str:
    """
    Replace ``marker`` + code pairs with the native section-sign escape.

    Unknown codes are left as-is, so a stray marker never breaks the output.
    """
    chars = list(text)
    for index in range(len(chars) - 1):
        if chars[index] == marker and chars[index + 1] in COLOR_CODES:
            chars[index] = SECTION_SIGN
            chars[index + 1] = chars[index + 1].lower()
    return "".join(chars)


def strip_color_codes(text: str) -> str:
    """Remove native colour escapes for plain-text surfaces."""
    return _STRIP_PATTERN.sub("", text)


__all__ = ["SECTION_SIGN", "COLOR_CODES", "translate_color_codes", "strip_color_codes"]
