from __future__ import annotations

import pytest

from src.config import get_settings
from src.config import toggles as toggle_module


def reset_cache() -> None:
    toggle_module.get_settings.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    reset_cache()
    yield
    reset_cache()


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("AACH_DB_PATH", str(tmp_path / "book.sqlite3"))
    monkeypatch.delenv("AACH_TIME_BOOK", raising=False)
    monkeypatch.delenv("AACH_BOOK_DATE", raising=False)
    settings = get_settings()
    assert settings.db_path_obj.name == "book.sqlite3"
    assert settings.book_cooldown_sec == 0
    assert settings.book_date == "Book created on DATE."


def test_cooldown_converted_to_milliseconds(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AACH_TIME_BOOK", "15")
    assert get_settings().book_cooldown_ms == 15000


def test_unrestricted_ids_split_on_commas(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AACH_UNRESTRICTED_IDS", "telegram:1, telegram:2,,")
    assert get_settings().unrestricted_ids == ("telegram:1", "telegram:2")


def test_boolean_toggles_parse_strings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AACH_SOUND", "false")
    monkeypatch.setenv("AACH_ADDITIONAL_EFFECTS", "0")
    settings = get_settings()
    assert settings.sound is False
    assert settings.additional_effects is False


def test_negative_cooldown_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AACH_TIME_BOOK", "-5")
    with pytest.raises(RuntimeError):
        get_settings()
