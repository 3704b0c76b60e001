from __future__ import annotations

from src.engine.storage import SQLiteStore
from tools.seed_achievements import seed


def test_seed_skips_duplicates(tmp_path) -> None:
    store = SQLiteStore(db_path=tmp_path / "seed.sqlite3")
    store.migrate()
    entries = [
        {"name": "Explorer", "description": "Visited 10 biomes", "achieved_at": "2024-01-01"},
        {"name": "Explorer", "description": "Duplicate"},
        {"name": "Miner"},
    ]
    assert seed(store, "user-1", entries) == 2
    flat = store.get_player_achievements_list("user-1")
    assert flat[:3] == ["Explorer", "Visited 10 biomes", "2024-01-01"]
    assert flat[3:5] == ["Miner", ""]
