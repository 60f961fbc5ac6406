"""Tests for xrf-dbg history helpers."""

from __future__ import annotations

from xrf_dbg.history import HistoryStore


def test_history_store_loads_existing_file(tmp_path):
    path = tmp_path / "history.txt"
    path.write_text("one\ntwo\n", encoding="utf-8")
    store = HistoryStore(str(path), limit=5)
    assert store.snapshot() == ["one", "two"]
    store.append("three")
    assert store.snapshot()[-1] == "three"
    assert "three" in path.read_text(encoding="utf-8")


def test_history_store_limits_entries(tmp_path):
    path = tmp_path / "history.txt"
    store = HistoryStore(str(path), limit=3)
    for idx in range(5):
        store.append(f"step {idx}")
    assert store.snapshot() == ["step 2", "step 3", "step 4"]
    assert path.read_text(encoding="utf-8").strip().splitlines() == ["step 2", "step 3", "step 4"]


def test_history_store_ignores_duplicates_and_blanks(tmp_path):
    store = HistoryStore(str(tmp_path / "h.txt"), limit=10)
    store.append("stack")
    store.append("stack")
    store.append("   ")
    assert store.snapshot() == ["stack"]


def test_history_store_without_path_stays_in_memory():
    store = HistoryStore(None)
    store.append("info")
    assert store.snapshot() == ["info"]
