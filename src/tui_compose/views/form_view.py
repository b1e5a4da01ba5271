"""
FormView - a Form and a Menu that pass focus between each other.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tui_compose.component import Component, View
from tui_compose.components.form import Form, FormField
from tui_compose.components.menu import Menu
from tui_compose.keys import Key, matches_key
from tui_compose.models import Direction, FormFieldDescription, MenuItem

if TYPE_CHECKING:
    from tui_compose.tab import Tab

logger = logging.getLogger(__name__)


class FormView(View):
    """
    A view providing a Form and a Menu.

    The menu starts with focus. Tabbing off either end of the menu moves
    focus into the form, and tabbing off either end of the form moves it
    back to the menu. Up/Down on the menu jump straight to the first field.
    """

    def __init__(
        self,
        tab: Tab,
        title: str,
        fields: list[FormFieldDescription],
        menu_items: list[MenuItem] | None = None,
        read_only: bool = False,
    ) -> None:
        super().__init__(title)
        self._tab = tab
        self._form = Form(
            tab,
            fields,
            read_only=read_only,
            on_no_more_fields=self._on_no_more_fields,
            on_escape=self._on_escape_from_field,
        )
        self._menu = Menu(tab, menu_items, on_no_more_items=self._on_no_more_items)
        self._active_component: Component = self._menu

    @property
    def menu(self) -> Menu:
        return self._menu

    @property
    def form(self) -> Form:
        return self._form

    @property
    def fields(self) -> list[FormField]:
        return self._form.fields

    @property
    def values(self) -> dict[str, str]:
        return self._form.values

    @property
    def active_component(self) -> Component:
        return self._active_component

    async def _on_no_more_items(self, direction: Direction) -> None:
        if not self._form.fields:
            # Nothing to move to; wrap around the menu instead
            if direction > 0:
                self._menu.set_first_item_selected()
            else:
                self._menu.set_last_item_selected()
            return
        logger.debug("Focus menu -> form (direction %d)", direction)
        self._active_component = self._form
        if direction > 0:
            self._form.set_first_field_selected()
        else:
            self._form.set_last_field_selected()

    async def _on_no_more_fields(self, direction: Direction) -> None:
        logger.debug("Focus form -> menu (direction %d)", direction)
        self._active_component = self._menu
        if direction > 0:
            self._menu.set_first_item_selected()
        else:
            self._menu.set_last_item_selected()

    async def _on_escape_from_field(self) -> None:
        self._active_component = self._menu

    async def handle(self, key: str) -> bool:
        vertical = matches_key(key, Key.down) or matches_key(key, Key.up)
        if vertical and self._active_component is self._menu and self._form.fields:
            # Menu doesn't respond to up/down; use them to move to the form
            self._active_component = self._form
            self._form.set_first_field_selected()
            return True
        return await self._active_component.handle(key)

    def render(self, inactive: bool = False) -> None:
        # Focused component last for cursor positioning
        if self._active_component is self._menu:
            self._form.render(True)
            self._menu.render(inactive)
        else:
            self._menu.render(True)
            self._form.render(inactive)
