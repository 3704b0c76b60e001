from __future__ import annotations

from src.utils import SECTION_SIGN, strip_color_codes, translate_color_codes


def test_translate_known_codes() -> None:
    assert translate_color_codes("&aGreen &LBold") == f"{SECTION_SIGN}aGreen {SECTION_SIGN}lBold"


def test_unknown_code_passes_through() -> None:
    assert translate_color_codes("50&z off & done&") == "50&z off & done&"


def test_translation_is_idempotent() -> None:
    once = translate_color_codes("&0Explorer\n&r2024-01-01")
    assert translate_color_codes(once) == once
    assert "&" not in once


def test_double_marker_only_translates_last_pair() -> None:
    assert translate_color_codes("&&a") == f"&{SECTION_SIGN}a"


def test_custom_marker() -> None:
    assert translate_color_codes("%cRed &c", marker="%") == f"{SECTION_SIGN}cRed &c"


def test_strip_color_codes() -> None:
    assert strip_color_codes(translate_color_codes("&7[&6Achievements&7] Hi")) == "[Achievements] Hi"
