"""
Text component - read-only multi-line text, paged to fit the content area.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from tui_compose.component import Component
from tui_compose.keys import Key, matches_key

if TYPE_CHECKING:
    from tui_compose.tab import Tab


class Text(Component):
    """
    Displays text one screenful at a time.

    The text itself is read-only; the only input handled is paging.
    """

    def __init__(self, tab: Tab, text: str) -> None:
        self._tab = tab
        self._text = text
        self._page = 1

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, text: str) -> None:
        self._text = text
        self._page = 1

    @property
    def page(self) -> int:
        return self._page

    @property
    def chars_per_page(self) -> int:
        output = self._tab.output
        return max(1, output.width * output.content_height)

    @property
    def page_count(self) -> int:
        return max(1, math.ceil(len(self._text) / self.chars_per_page))

    async def page_up(self) -> None:
        if self._page == 1:
            self._tab.set_info("Already at start")
            return
        self._page -= 1

    async def page_down(self) -> None:
        if self._page >= self.page_count:
            self._tab.set_info("No more pages")
            return
        self._page += 1

    async def handle(self, key: str) -> bool:
        if matches_key(key, Key.down) or matches_key(key, Key.page_down):
            await self.page_down()
            return True
        if matches_key(key, Key.up) or matches_key(key, Key.page_up):
            await self.page_up()
            return True
        return False

    def render(self, inactive: bool = False) -> None:
        output = self._tab.output
        start = (self._page - 1) * self.chars_per_page
        page_text = self._text[start:start + self.chars_per_page]
        for row in range(output.content_height):
            line = page_text[row * output.width:(row + 1) * output.width]
            if not line:
                break
            output.cursor_to(0, output.content_start_row + row)
            output.write(line)
