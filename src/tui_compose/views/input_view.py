"""
InputView - a single, possibly very long, input with history.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable

from tui_compose.component import View
from tui_compose.components.input import Input
from tui_compose.components.input_help import DEFAULT_TEXT, InputHelp
from tui_compose.history import HistoryStore
from tui_compose.keys import Key, matches_key
from tui_compose.utils import bold, gray

if TYPE_CHECKING:
    from tui_compose.tab import Tab

HELP_TEXT = f"{DEFAULT_TEXT}; {bold('Up')} and {bold('Down')} for history"
INSTRUCTIONS_OFFSET = 2  # Rows below the start of content


class InputView(View):
    """
    View with one input field and help text in place of the menu, plus
    optional instructions below the input.

    Useful when a single value is needed and it may wrap over several
    lines. Up/Down walk through earlier entries. History is kept per title
    in a HistoryStore, so views sharing a title share history.
    """

    def __init__(
        self,
        tab: Tab,
        title: str,
        on_enter: Callable[[str], Awaitable[None]],
        instructions: str | None = None,
        history: HistoryStore | None = None,
    ) -> None:
        super().__init__(title)
        self._tab = tab
        self._on_enter = on_enter
        self._instructions = instructions
        self._history_store = history if history is not None else tab.history_store
        self._history_level = 0
        self._input = Input(tab, self._on_input_enter)
        self._help = InputHelp(tab, HELP_TEXT)

    @property
    def input(self) -> Input:
        return self._input

    @property
    def history(self) -> list[str]:
        return self._history_store.get(self._title)

    def _add_history(self, value: str) -> None:
        history = [entry for entry in self.history if entry != value]
        history.append(value)
        self._history_store.put(self._title, history)

    async def _on_input_enter(self, value: str) -> None:
        self._add_history(value)
        self._history_level = 0
        self._input.value = ""
        await self._on_enter(value)

    def _load_earlier(self) -> None:
        history = self.history
        if self._history_level < len(history):
            self._history_level += 1
        self._load_from_history(history)

    def _load_later(self) -> None:
        if self._history_level > 1:
            self._history_level -= 1
            self._load_from_history(self.history)
        else:
            # History exhausted
            self._history_level = 0
            self._input.value = ""

    def _load_from_history(self, history: list[str]) -> None:
        if not history:
            self._tab.set_warning("No history found")
            return
        self._input.value = history[len(history) - self._history_level]

    async def handle(self, key: str) -> bool:
        if matches_key(key, Key.up):
            self._load_earlier()
            return True
        if matches_key(key, Key.down):
            self._load_later()
            return True
        return await self._input.handle(key)

    def render(self, inactive: bool = False) -> None:
        output = self._tab.output
        # The input may wrap over the instructions once something is typed
        if not self._input.value and self._instructions:
            output.cursor_to(0, output.content_start_row + INSTRUCTIONS_OFFSET)
            output.write(gray(self._instructions))

        self._help.render()

        # Input last for correct cursor positioning
        self._input.render(inactive)
