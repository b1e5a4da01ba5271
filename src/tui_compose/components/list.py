"""
List component - a paged, multi-column table with optional row selection.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, Sequence, TypeVar

from tui_compose.component import Component
from tui_compose.errors import ConfigurationError
from tui_compose.keys import Key, matches_key
from tui_compose.models import ListColumn, MenuItem
from tui_compose.utils import heading, inverse, pad_right, truncate_to_width

if TYPE_CHECKING:
    from tui_compose.components.menu import Menu
    from tui_compose.tab import Tab

logger = logging.getLogger(__name__)

T = TypeVar("T")

ListOnSelect = Callable[[], Awaitable[None]]
ListOnEnter = Callable[[int], Awaitable[None]]


class List(Component, Generic[T]):
    """
    A multi-column list over items of any type.

    The page height is the content height of the tab's output. With
    ``row_selection`` one row of the current page is highlighted and
    Up/Down move it, paging when the selection crosses a page boundary.
    Without it Up/Down page through the items.

    Args:
        tab: Owning tab, used for status messages and the output
        columns: Column descriptors
        items: Items to display
        show_headings: Draw the heading row above the content
        menu: If given, Page Down/Page Up items are added to this menu
        row_selection: Allow the user to select a row
        on_select: Called after the selected row or page changes;
            requires ``row_selection``
        on_enter: Called with the selected item index when Enter is pressed
    """

    def __init__(
        self,
        tab: Tab,
        columns: list[ListColumn],
        items: Sequence[T],
        show_headings: bool = True,
        menu: Menu | None = None,
        row_selection: bool = False,
        on_select: ListOnSelect | None = None,
        on_enter: ListOnEnter | None = None,
    ) -> None:
        if on_select is not None and not row_selection:
            raise ConfigurationError("on_select callback is incompatible with row_selection=False")

        self._tab = tab
        self._columns = columns
        self._show_headings = show_headings
        self._row_selection = row_selection
        self._on_select = on_select
        self._on_enter = on_enter
        self._items: Sequence[T] = []
        self._start_index = 0
        self._selected_page_row = 0
        self.set_items(items)

        if menu is not None:
            menu.add_item(MenuItem(
                key="D",
                label="Page Down",
                help="Go to next page",
                execute=self.page_down,
                visible=lambda: not self.is_last_page(),
            ))
            menu.add_item(MenuItem(
                key="U",
                label="Page Up",
                help="Return to previous page",
                execute=self.page_up,
                visible=lambda: self.current_page() > 1,
            ))

    # -------------------------------------------------------------------------
    # Items and paging state
    # -------------------------------------------------------------------------

    @property
    def items(self) -> Sequence[T]:
        return self._items

    @items.setter
    def items(self, items: Sequence[T]) -> None:
        self.set_items(items)

    def set_items(self, items: Sequence[T]) -> None:
        """Replace the items, returning to the first row of the first page."""
        self._items = items
        self._start_index = 0
        self._selected_page_row = 0

    @property
    def page_height(self) -> int:
        return max(1, self._tab.output.content_height)

    @property
    def start_index(self) -> int:
        return self._start_index

    @property
    def selected_page_row(self) -> int:
        return self._selected_page_row

    @property
    def selected_row_index(self) -> int:
        """Index into ``items`` of the selected row."""
        return self._start_index + self._selected_page_row

    def current_page(self) -> int:
        return math.ceil((self._start_index + 1) / self.page_height)

    def number_of_pages(self) -> int:
        return len(self._items) // self.page_height + 1

    def is_last_page(self) -> bool:
        return self.current_page() >= self.number_of_pages()

    def _last_row_on_page(self) -> int:
        remaining = len(self._items) - self._start_index
        return max(0, min(self.page_height, remaining) - 1)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    async def _notify_select(self) -> None:
        if self._on_select:
            await self._on_select()

    async def page_up(self) -> None:
        if self._start_index == 0:
            self._tab.set_info("Already at start")
            return
        self._start_index = max(0, self._start_index - self.page_height)
        self._selected_page_row = self._last_row_on_page()
        await self._notify_select()

    async def page_down(self) -> None:
        if self._start_index + self.page_height > len(self._items):
            self._tab.set_info("No more pages")
            return
        self._start_index = min(self._start_index + self.page_height, max(0, len(self._items) - 1))
        self._selected_page_row = 0
        await self._notify_select()

    async def select_previous(self) -> None:
        """Select the previous row, paging up from the top of a page."""
        if self._selected_page_row == 0:
            await self.page_up()
            return
        self._selected_page_row -= 1
        await self._notify_select()

    async def select_next(self) -> None:
        """Select the next row, paging down from the bottom of a page."""
        is_last_page = self.is_last_page()
        if self.selected_row_index + 1 >= len(self._items):
            self._tab.set_info("No more records")
        elif not is_last_page and self._selected_page_row >= self.page_height - 1:
            await self.page_down()
        elif is_last_page and self._selected_page_row >= len(self._items) % self.page_height - 1:
            self._tab.set_info("No more records")
        else:
            self._selected_page_row += 1
            await self._notify_select()

    async def set_first_row_selected(self) -> None:
        """Select the first row of the current page."""
        self._selected_page_row = 0
        await self._notify_select()

    async def set_last_row_selected(self) -> None:
        """Select the last row of the current page."""
        self._selected_page_row = self._last_row_on_page()
        await self._notify_select()

    async def handle(self, key: str) -> bool:
        if matches_key(key, Key.enter):
            if self._on_enter and self._items:
                await self._on_enter(self.selected_row_index)
                return True
            return False

        if matches_key(key, Key.down):
            if self._row_selection:
                await self.select_next()
            else:
                await self.page_down()
            return True

        if matches_key(key, Key.up):
            if self._row_selection:
                await self.select_previous()
            else:
                await self.page_up()
            return True

        if matches_key(key, Key.page_down):
            await self.page_down()
            return True

        if matches_key(key, Key.page_up):
            await self.page_up()
            return True

        return False

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _row_text(self, item: Any, index: int) -> str:
        return "".join(
            f"{pad_right(column.value(item, index), column.width)} "
            for column in self._columns
        )

    def render(self, inactive: bool = False) -> None:
        output = self._tab.output

        if self._show_headings:
            output.cursor_to(0, output.content_start_row - 1)
            text = "".join(f"{pad_right(column.heading, column.width)} " for column in self._columns)
            output.write(heading(text))

        page = self._items[self._start_index:self._start_index + self.page_height]
        for row, item in enumerate(page):
            text = truncate_to_width(self._row_text(item, self._start_index + row), output.width)
            output.cursor_to(0, output.content_start_row + row)
            if self._row_selection and row == self._selected_page_row:
                output.write(inverse(text))
            else:
                output.write(text)

        if not inactive and self._row_selection and page:
            output.cursor_to(0, output.content_start_row + self._selected_page_row)
