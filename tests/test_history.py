"""
Tests for tui_compose.history.
"""

from tui_compose.history import InMemoryHistoryStore


class TestInMemoryHistoryStore:

    def test_missing_key_is_empty(self):
        assert InMemoryHistoryStore().get("Search") == []

    def test_put_and_get(self):
        store = InMemoryHistoryStore()
        store.put("Search", ["a", "b"])
        assert store.get("Search") == ["a", "b"]
        assert store.keys() == ["Search"]

    def test_returns_copies(self):
        store = InMemoryHistoryStore()
        history = ["a"]
        store.put("Search", history)
        history.append("b")
        store.get("Search").append("c")
        assert store.get("Search") == ["a"]
