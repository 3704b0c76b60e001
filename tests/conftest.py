from __future__ import annotations

import pytest

from src.config import toggles as toggle_module


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("AACH_DB_PATH", str(tmp_path / "default.sqlite3"))
    toggle_module.get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    toggle_module.get_settings.cache_clear()  # type: ignore[attr-defined]
