"""
SelectView - a single column list of options, each running its own action.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tui_compose.component import Component, View
from tui_compose.components.list import List
from tui_compose.components.menu import Menu
from tui_compose.keys import Key, matches_key
from tui_compose.models import Direction, ListColumn, MenuItem, SelectViewItem

if TYPE_CHECKING:
    from tui_compose.tab import Tab

logger = logging.getLogger(__name__)

_FORWARD_KEYS = (Key.tab, Key.right)
_BACKWARD_KEYS = (Key.shift_tab, Key.left)


class SelectView(View):
    """
    A view with a single column list whose rows each execute a different
    action when chosen with Enter or the OK menu item.

    The list keeps focus until it is given a key it doesn't handle; that
    key goes to the menu, which takes focus back. Tab and Right select the
    first menu item, Shift-Tab and Left the last. Running out of rows does
    not return focus to the menu.
    """

    def __init__(self, tab: Tab, title: str, items: list[SelectViewItem]) -> None:
        super().__init__(title)
        self._tab = tab
        self._items = items

        self._menu = Menu(
            tab,
            [MenuItem(key="O", label="OK", help="Continue with selected item", execute=self._on_ok)],
            on_no_more_items=self._on_no_more_items,
        )

        longest_label = max((len(item.label) for item in items), default=0)
        columns = [ListColumn(heading="Option", width=longest_label, value=lambda item, index: item.label)]
        self._list: List[SelectViewItem] = List(
            tab,
            columns,
            items,
            show_headings=False,
            menu=self._menu,
            row_selection=True,
            on_enter=self._on_list_enter,
        )
        self._active_component: Component = self._menu

    @property
    def menu(self) -> Menu:
        return self._menu

    @property
    def list(self) -> List[SelectViewItem]:
        return self._list

    @property
    def active_component(self) -> Component:
        return self._active_component

    async def _on_list_enter(self, index: int) -> None:
        item = self._items[index]
        if item.execute:
            await item.execute()
        else:
            self._tab.set_warning(f"Sorry, the '{item.label}' option hasn't been implemented yet.")

    async def _on_ok(self) -> None:
        if self._items:
            await self._on_list_enter(self._list.selected_row_index)

    async def _on_no_more_items(self, direction: Direction) -> None:
        if not self._items:
            if direction > 0:
                self._menu.set_first_item_selected()
            else:
                self._menu.set_last_item_selected()
            return
        logger.debug("Focus menu -> list (direction %d)", direction)
        self._active_component = self._list
        if direction > 0:
            await self._list.set_first_row_selected()
        else:
            await self._list.set_last_row_selected()

    async def handle(self, key: str) -> bool:
        vertical = matches_key(key, Key.down) or matches_key(key, Key.up)
        if vertical and self._active_component is self._menu and self._items:
            logger.debug("Focus menu -> list (vertical key)")
            self._active_component = self._list
            return await self._list.handle(key)

        handled = await self._active_component.handle(key)
        if handled or self._active_component is not self._list:
            return handled

        logger.debug("Focus list -> menu (unhandled key)")
        self._active_component = self._menu
        # Navigation keys enter the menu at the end they point to
        if any(matches_key(key, candidate) for candidate in _FORWARD_KEYS):
            self._menu.set_first_item_selected()
            return True
        if any(matches_key(key, candidate) for candidate in _BACKWARD_KEYS):
            self._menu.set_last_item_selected()
            return True
        return await self._menu.handle(key)

    def render(self, inactive: bool = False) -> None:
        # Focused component last for cursor positioning
        if self._active_component is self._menu:
            self._list.render(True)
            self._menu.render(inactive)
        else:
            self._menu.render(True)
            self._list.render(inactive)
