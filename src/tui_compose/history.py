"""
Input history storage for InputView.

History is keyed by view title, so views with the same title share it.
"""

from __future__ import annotations

from typing import Protocol


class HistoryStore(Protocol):
    """Storage for per-title input history, oldest entry first."""

    def get(self, key: str) -> list[str]: ...

    def put(self, key: str, history: list[str]) -> None: ...


class InMemoryHistoryStore:
    """History kept for the lifetime of one application session."""

    def __init__(self) -> None:
        self._history: dict[str, list[str]] = {}

    def get(self, key: str) -> list[str]:
        return list(self._history.get(key, []))

    def put(self, key: str, history: list[str]) -> None:
        self._history[key] = list(history)

    def keys(self) -> list[str]:
        return list(self._history)
