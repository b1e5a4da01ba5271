"""
InputHelp - help text drawn in place of the menu for views without a menu.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tui_compose.component import Component
from tui_compose.errors import UnsupportedInputError
from tui_compose.utils import bold

if TYPE_CHECKING:
    from tui_compose.tab import Tab

DEFAULT_TEXT = f"Press {bold('Enter')} to accept; {bold('Esc')} to cancel"


class InputHelp(Component):
    """Static help line on the menu row. It never receives input."""

    def __init__(self, tab: Tab, help_text: str = DEFAULT_TEXT) -> None:
        self._tab = tab
        self._help_text = help_text

    @property
    def help_text(self) -> str:
        return self._help_text

    def render(self, inactive: bool = False) -> None:
        output = self._tab.output
        output.cursor_to(0, output.menu_row)
        output.write(self._help_text)

    async def handle(self, key: str) -> bool:
        raise UnsupportedInputError(f"Input help cannot handle input (key: {key!r})")
