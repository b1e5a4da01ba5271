"""
Menu component - a horizontal row of keyed items with one selected item.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable, Literal

from tui_compose.component import Component
from tui_compose.config import ITEM_GAP, MENU_PREFIX
from tui_compose.errors import DuplicateKeyError
from tui_compose.keys import Key, matches_key
from tui_compose.models import Direction, MenuItem
from tui_compose.utils import blue, bold

if TYPE_CHECKING:
    from tui_compose.tab import Tab

logger = logging.getLogger(__name__)

QUIT_KEY = "Q"
BACK_KEY = "B"
SEPARATOR = " · "

MenuOnNoMoreItems = Callable[[Direction], Awaitable[None]]


class Menu(Component):
    """
    A horizontal row of MenuItems from which the user can choose.

    Every menu ends with a Quit item. Most menus start with a Back item,
    which can be left out with ``hide_back_item``. When ``on_no_more_items``
    is given, navigating past either end calls it with the direction instead
    of wrapping around, so the owner can move focus elsewhere.
    """

    def __init__(
        self,
        tab: Tab,
        items: list[MenuItem] | None = None,
        hide_back_item: bool = False,
        on_no_more_items: MenuOnNoMoreItems | None = None,
    ) -> None:
        self._tab = tab
        self._items: list[MenuItem] = []
        self._selected_key: str | None = None
        self._on_no_more_items = on_no_more_items
        self._has_back = False

        # Every menu has to allow for quitting
        self.add_item(MenuItem(key=QUIT_KEY, label="Quit", help="Exit the program"))

        if not hide_back_item:
            self.add_item(MenuItem(key=BACK_KEY, label="Back", help="Go back to previous menu"), "start")
            self._has_back = True

        for item in items or []:
            self.add_item(item)

        self.set_first_item_selected()

    @property
    def items(self) -> list[MenuItem]:
        """All items, including any that are currently hidden."""
        return list(self._items)

    @property
    def selected_item(self) -> MenuItem | None:
        return self._find(self._selected_key)

    @property
    def has_back(self) -> bool:
        return self._has_back

    def _find(self, key: str | None) -> MenuItem | None:
        for item in self._items:
            if item.key == key:
                return item
        return None

    def add_item(self, item: MenuItem, position: Literal["start", "end"] = "end") -> None:
        """
        Add a single item.

        ``"start"`` places the item straight after Back, ``"end"`` straight
        before Quit.

        Raises:
            DuplicateKeyError: the item's key is already used in this menu
        """
        if self._find(item.key) is not None:
            raise DuplicateKeyError(item.key)

        if position == "start":
            self._items.insert(1 if self._has_back else 0, item)
        else:
            # Quit is always last
            self._items.insert(max(0, len(self._items) - 1), item)

    def get_visible_items(self) -> list[MenuItem]:
        return [item for item in self._items if item.is_visible()]

    def set_selected_item(self, item: MenuItem | None, show_help: bool = True) -> None:
        """Select an item, showing its help text in the status bar unless ``show_help`` is False."""
        self._selected_key = item.key if item is not None else None
        if item is not None and show_help:
            self._tab.set_info(item.help)

    def set_first_item_selected(self, show_help: bool = True) -> None:
        visible_items = self.get_visible_items()
        self.set_selected_item(visible_items[0] if visible_items else None, show_help)

    def set_last_item_selected(self, show_help: bool = True) -> None:
        visible_items = self.get_visible_items()
        self.set_selected_item(visible_items[-1] if visible_items else None, show_help)

    def _selected_visible_index(self, visible_items: list[MenuItem]) -> int:
        for index, item in enumerate(visible_items):
            if item.key == self._selected_key:
                return index
        return -1

    async def cycle_selected_item(self, direction: Direction) -> None:
        """Move the selection backward or forward between visible items."""
        visible_items = self.get_visible_items()
        selected_index = self._selected_visible_index(visible_items)
        if selected_index < 0:
            # Selected item was hidden since it was chosen
            if direction > 0:
                self.set_first_item_selected()
            else:
                self.set_last_item_selected()
            return

        selected_index += direction
        if 0 <= selected_index < len(visible_items):
            self.set_selected_item(visible_items[selected_index])
        elif self._on_no_more_items:
            logger.debug("Menu out of items (direction %d)", direction)
            await self._on_no_more_items(direction)
        elif selected_index < 0:
            self.set_last_item_selected()
        else:
            self.set_first_item_selected()

    async def handle(self, key: str) -> bool:
        selected = self.selected_item
        if matches_key(key, Key.enter):
            if selected is None:
                return False
            return await self.handle(selected.key)

        if matches_key(key, Key.escape):
            if self._tab.view_depth:
                self._tab.pop_view()
            return True

        if matches_key(key, Key.left) or matches_key(key, Key.shift_tab):
            await self.cycle_selected_item(-1)
            return True

        if matches_key(key, Key.right) or matches_key(key, Key.tab):
            await self.cycle_selected_item(1)
            return True

        if len(key) != 1:
            return False

        upper_key = key.upper()
        if upper_key == BACK_KEY and self._has_back:
            if self._tab.view_depth:
                self._tab.pop_view()
                return True
            return False

        if upper_key == QUIT_KEY:
            self._tab.quit()
            return True

        for item in self.get_visible_items():
            if item.key.upper() == upper_key:
                if item.execute:
                    await item.execute()
                else:
                    self._tab.set_warning(f"Sorry, the '{item.label}' feature is not implemented yet")
                return True
        return False

    def render(self, inactive: bool = False) -> None:
        output = self._tab.output
        # Items may have been hidden since the last render, including the
        # selected one. The status bar is already drawn, so no help text.
        visible_items = self.get_visible_items()
        if self._selected_visible_index(visible_items) < 0:
            self.set_first_item_selected(show_help=False)

        parts = []
        for item in visible_items:
            position = item.key_position
            key_text = item.key if inactive else bold(item.key)
            parts.append(f"{item.label[:position]}{key_text}{item.label[position + 1:]}")

        output.cursor_to(0, output.menu_row)
        output.write(f"{blue(MENU_PREFIX)} | {SEPARATOR.join(parts)} |")

        if not inactive:
            self._cursor_to_selected_item(visible_items)

    def _cursor_to_selected_item(self, visible_items: list[MenuItem]) -> None:
        selected_index = self._selected_visible_index(visible_items)
        if selected_index < 0:
            return
        column = len(MENU_PREFIX) + 3
        for item in visible_items[:selected_index]:
            column += len(item.label) + ITEM_GAP
        column += visible_items[selected_index].key_position
        self._tab.output.cursor_to(column, self._tab.output.menu_row)
