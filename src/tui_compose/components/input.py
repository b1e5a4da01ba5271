"""
Input component - single-line text buffer with a type constraint.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable

from tui_compose.component import Component
from tui_compose.keys import Key, matches_key
from tui_compose.models import InputType

if TYPE_CHECKING:
    from tui_compose.tab import Tab

DIGITS = frozenset("0123456789")
PROMPT_WIDTH = 2
# Shorter chunks are escape sequences we don't recognize, longer ones are pastes
MIN_PASTE_LENGTH = 5


class Input(Component):
    """
    Input component for accepting user text.

    ``integer`` inputs only ever hold digits. ``password`` inputs keep the
    real value and only mask it when drawn.
    """

    def __init__(
        self,
        tab: Tab,
        on_enter: Callable[[str], Awaitable[None]] | None = None,
        value: str = "",
        type: InputType = "string",
    ) -> None:
        self._tab = tab
        self._on_enter = on_enter
        self._type = type
        self._value = ""
        self.value = value

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        if self._type == "integer" and not set(value) <= DIGITS:
            raise ValueError(f"Integer input cannot hold {value!r}")
        self._value = value

    @property
    def type(self) -> InputType:
        return self._type

    async def handle(self, key: str) -> bool:
        if matches_key(key, Key.backspace):
            self._value = self._value[:-1]
            return True

        if matches_key(key, Key.enter):
            if self._on_enter:
                await self._on_enter(self._value)
            return True

        if matches_key(key, Key.escape):
            if self._value:
                self._value = ""
            else:
                self._tab.pop_view()
            return True

        if self._type == "integer":
            # The whole chunk is rejected if any character is not a digit
            if key and set(key) <= DIGITS:
                self._value += key
                return True
            return False

        if len(key) == 1 and ord(key) > 0x1F:
            self._value += key
            return True
        if len(key) >= MIN_PASTE_LENGTH:
            self._value += key
            return True
        # 2 to 4 characters: probably arrow keys or similar that would
        # corrupt the buffer. Pastes this short are lost too.
        return False

    def render(
        self,
        inactive: bool = False,
        at_column: int = 0,
        at_row: int | None = None,
        allow_wrap: bool = True,
    ) -> None:
        output = self._tab.output
        if at_row is None:
            at_row = output.content_start_row
        value = self._value
        value_width = max(1, output.width - at_column - PROMPT_WIDTH)
        rows = len(value) // value_width + 1 if allow_wrap else 1

        overflow = False
        for row in range(rows):
            if row == 0:
                prompt = ": " if inactive else "> "
            else:
                prompt = " " * PROMPT_WIDTH
            if allow_wrap or inactive or len(value) < value_width:
                text = self._mask(value[row * value_width:(row + 1) * value_width])
            else:
                # Scroll so the tail and the cell the cursor sits in are visible
                overflow = True
                text = self._mask(value[len(value) - value_width + 1:]) + " "
            output.cursor_to(at_column, at_row + row)
            output.write(f"{prompt}{text}")

        if not inactive:
            if overflow:
                cursor_column = at_column + PROMPT_WIDTH + value_width - 1
            else:
                cursor_column = at_column + PROMPT_WIDTH + len(value) % value_width
            output.cursor_to(cursor_column, at_row + rows - 1)

    def _mask(self, text: str) -> str:
        if self._type == "password":
            return "*" * len(text)
        return text
