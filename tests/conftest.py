"""
Shared pytest fixtures for tui_compose tests.
"""

from __future__ import annotations

import re
from typing import Callable

import pytest

from tui_compose.component import View
from tui_compose.output import Output
from tui_compose.tab import Tab

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[a-zA-Z]")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


# =============================================================================
# Output Mock Fixtures
# =============================================================================


class MockOutput(Output):
    """Output recording every operation instead of drawing."""

    def __init__(self, width: int = 80, height: int = 9) -> None:
        self._width = width
        self._height = height
        self.ops: list[tuple] = []
        self.cursor = (0, 0)
        self.rows: dict[int, str] = {}
        self.clear_count = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self) -> None:
        self.clear_count += 1
        self.cursor = (0, 0)
        self.rows.clear()
        self.ops.append(("clear",))

    def cursor_to(self, column: int, row: int) -> None:
        self.cursor = (column, row)
        self.ops.append(("cursor_to", column, row))

    def write(self, text: str) -> None:
        column, row = self.cursor
        line = self.rows.get(row, "")
        plain = strip_ansi(text)
        line = line.ljust(column)
        self.rows[row] = line[:column] + plain + line[column + len(plain):]
        self.ops.append(("write", text))

    def text_at(self, row: int) -> str:
        """Plain text drawn on a row."""
        return self.rows.get(row, "")

    def writes(self) -> list[str]:
        return [op[1] for op in self.ops if op[0] == "write"]

    def reset(self) -> None:
        self.ops.clear()
        self.rows.clear()


@pytest.fixture
def output() -> MockOutput:
    """80 columns, 9 rows: four rows of content."""
    return MockOutput()


# =============================================================================
# App / Tab Fixtures
# =============================================================================


class FakeApp:
    """Owner of a Tab that records quit requests."""

    def __init__(self) -> None:
        self.quit_count = 0

    def quit(self) -> None:
        self.quit_count += 1


class StubView(View):
    """View recording the keys and renders it receives."""

    def __init__(self, title: str = "Home", handled: bool = False) -> None:
        super().__init__(title)
        self.keys: list[str] = []
        self.renders: list[bool] = []
        self._handled = handled

    def render(self, inactive: bool = False) -> None:
        self.renders.append(inactive)

    async def handle(self, key: str) -> bool:
        self.keys.append(key)
        return self._handled


@pytest.fixture
def fake_app() -> FakeApp:
    return FakeApp()


@pytest.fixture
def make_tab(fake_app: FakeApp, output: MockOutput) -> Callable[..., Tab]:
    """Build a Tab on the shared output; the initial view is a StubView by default."""

    def _make(initial_view: Callable[[Tab], View] | None = None) -> Tab:
        return Tab(fake_app, output, initial_view or (lambda tab: StubView()))

    return _make


@pytest.fixture
def tab(make_tab: Callable[..., Tab]) -> Tab:
    return make_tab()
