"""
Form component - labeled Input fields with one optional selected field.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Awaitable, Callable

from tui_compose.component import Component
from tui_compose.components.input import Input
from tui_compose.config import FORM_INPUT_COLUMN
from tui_compose.keys import Key, matches_key
from tui_compose.models import Direction, FormFieldDescription

if TYPE_CHECKING:
    from tui_compose.tab import Tab

logger = logging.getLogger(__name__)

FormOnNoMoreFields = Callable[[Direction], Awaitable[None]]
FormOnEscape = Callable[[], Awaitable[None]]

_BACKWARD_KEYS = (Key.up, Key.left, Key.shift_tab)
_FORWARD_KEYS = (Key.down, Key.right, Key.tab, Key.enter)


@dataclass
class FormField:
    """A visible field in a Form."""
    label: str
    input: Input


class Form(Component):
    """
    A component presenting several Input components.

    No field is selected until the user navigates into the form. Navigating
    past the first or last field clears the selection and calls
    ``on_no_more_fields`` so the owner can move focus elsewhere; a Form
    never wraps around on its own.
    """

    def __init__(
        self,
        tab: Tab,
        fields: list[FormFieldDescription],
        read_only: bool = False,
        on_no_more_fields: FormOnNoMoreFields | None = None,
        on_escape: FormOnEscape | None = None,
    ) -> None:
        self._tab = tab
        self._fields = [
            FormField(
                label=description.label,
                input=Input(tab, self._on_enter, description.value, description.type),
            )
            for description in fields
        ]
        self._selected_field_index: int | None = None
        self._read_only = read_only
        self._on_no_more_fields = on_no_more_fields
        self._on_escape = on_escape

    async def _on_enter(self, value: str) -> None:
        await self.cycle_selected_field(1)

    @property
    def fields(self) -> list[FormField]:
        return self._fields

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def values(self) -> dict[str, str]:
        return {field.label: field.input.value for field in self._fields}

    @property
    def selected_field_index(self) -> int | None:
        return self._selected_field_index

    @property
    def selected_field(self) -> FormField | None:
        if self._selected_field_index is None:
            return None
        return self._fields[self._selected_field_index]

    def set_first_field_selected(self) -> None:
        self._selected_field_index = 0 if self._fields else None

    def set_last_field_selected(self) -> None:
        self._selected_field_index = len(self._fields) - 1 if self._fields else None

    def clear_selection(self) -> None:
        self._selected_field_index = None

    async def cycle_selected_field(self, direction: Direction) -> None:
        """Move the selection backward or forward between fields."""
        if self._selected_field_index is None and self._fields:
            if direction > 0:
                self.set_first_field_selected()
            else:
                self.set_last_field_selected()
            return

        index = (self._selected_field_index or 0) + direction
        if self._fields and 0 <= index < len(self._fields):
            self._selected_field_index = index
            return

        # No more fields this way - the owner may switch to another
        # component such as a menu
        self._selected_field_index = None
        if self._on_no_more_fields:
            logger.debug("Form out of fields (direction %d)", direction)
            await self._on_no_more_fields(direction)

    async def handle(self, key: str) -> bool:
        if matches_key(key, Key.escape):
            if self._on_escape:
                self._selected_field_index = None
                await self._on_escape()
                return True
            return False

        if any(matches_key(key, candidate) for candidate in _BACKWARD_KEYS):
            await self.cycle_selected_field(-1)
            return True

        if any(matches_key(key, candidate) for candidate in _FORWARD_KEYS):
            await self.cycle_selected_field(1)
            return True

        field = self.selected_field
        if field is None:
            return False
        if self._read_only:
            self._tab.set_warning("This form is not editable.")
        else:
            await field.input.handle(key)
        return True

    def _render_field(self, index: int, active: bool) -> None:
        output = self._tab.output
        row = output.content_start_row + index
        field = self._fields[index]
        output.cursor_to(0, row)
        output.write(field.label)
        field.input.render(not active, FORM_INPUT_COLUMN, row, False)

    def render(self, inactive: bool = False) -> None:
        selected = None if inactive else self._selected_field_index
        for index in range(len(self._fields)):
            if index != selected:
                self._render_field(index, False)

        # Active field last so the cursor is left in its input
        if selected is not None:
            self._render_field(selected, True)
