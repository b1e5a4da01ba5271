"""
Tests for tui_compose.views.form_view.
"""

from unittest.mock import AsyncMock

import pytest

from tui_compose.keys import Key
from tui_compose.models import FormFieldDescription, MenuItem
from tui_compose.views.form_view import FormView


def person_fields() -> list[FormFieldDescription]:
    return [
        FormFieldDescription(label="Name"),
        FormFieldDescription(label="Age", type="integer"),
    ]


@pytest.fixture
def save():
    return AsyncMock()


@pytest.fixture
def view(tab, save) -> FormView:
    return FormView(tab, "Person", person_fields(), [MenuItem(key="S", label="Save", execute=save)])


class TestFormViewFocus:

    def test_menu_starts_focused(self, view):
        assert view.title == "Person"
        assert view.active_component is view.menu
        assert view.form.selected_field_index is None
        assert view.menu.selected_item.key == "B"

    @pytest.mark.asyncio
    async def test_tab_off_menu_end_selects_first_field(self, view):
        for _ in range(3):
            assert await view.handle(Key.tab) is True
        assert view.active_component is view.form
        assert view.form.selected_field_index == 0

    @pytest.mark.asyncio
    async def test_shift_tab_off_menu_start_selects_last_field(self, view):
        assert await view.handle(Key.shift_tab) is True
        assert view.active_component is view.form
        assert view.form.selected_field_index == 1

    @pytest.mark.asyncio
    async def test_tab_off_last_field_selects_first_item(self, view):
        await view.handle(Key.shift_tab)
        view.menu.set_last_item_selected()
        assert await view.handle(Key.tab) is True
        assert view.active_component is view.menu
        assert view.menu.selected_item.key == "B"
        assert view.form.selected_field_index is None

    @pytest.mark.asyncio
    async def test_shift_tab_off_first_field_selects_last_item(self, view):
        await view.handle(Key.down)
        assert await view.handle(Key.shift_tab) is True
        assert view.active_component is view.menu
        assert view.menu.selected_item.key == "Q"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", [Key.down, Key.up])
    async def test_vertical_key_on_menu_selects_first_field(self, view, key):
        assert await view.handle(key) is True
        assert view.active_component is view.form
        assert view.form.selected_field_index == 0

    @pytest.mark.asyncio
    async def test_escape_in_form_returns_to_menu(self, view):
        await view.handle(Key.down)
        assert await view.handle(Key.escape) is True
        assert view.active_component is view.menu
        assert view.form.selected_field_index is None

    @pytest.mark.asyncio
    async def test_enter_on_last_field_returns_to_menu(self, view):
        await view.handle(Key.down)
        await view.handle(Key.enter)
        assert view.form.selected_field_index == 1
        await view.handle(Key.enter)
        assert view.active_component is view.menu
        assert view.menu.selected_item.key == "B"


class TestFormViewInput:

    @pytest.mark.asyncio
    async def test_typing_edits_selected_field(self, view):
        await view.handle(Key.down)
        for key in "Ada":
            await view.handle(key)
        await view.handle(Key.down)
        await view.handle("3")
        await view.handle("6")
        assert view.values == {"Name": "Ada", "Age": "36"}
        assert [field.label for field in view.fields] == ["Name", "Age"]

    @pytest.mark.asyncio
    async def test_menu_keys_run_actions(self, view, save):
        assert await view.handle("s") is True
        save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_menu_keys_are_text_while_form_focused(self, view, save):
        await view.handle(Key.down)
        await view.handle("s")
        save.assert_not_awaited()
        assert view.values["Name"] == "s"

    @pytest.mark.asyncio
    async def test_read_only_view(self, tab):
        view = FormView(tab, "Person", [FormFieldDescription(label="Name", default="Ada")], read_only=True)
        await view.handle(Key.down)
        await view.handle("x")
        assert view.values == {"Name": "Ada"}
        assert tab.status.message == "This form is not editable."


class TestFormViewWithoutFields:

    @pytest.mark.asyncio
    async def test_menu_wraps(self, tab):
        view = FormView(tab, "Empty", [])
        await view.handle(Key.shift_tab)
        assert view.active_component is view.menu
        assert view.menu.selected_item.key == "Q"
        await view.handle(Key.tab)
        assert view.menu.selected_item.key == "B"

    @pytest.mark.asyncio
    async def test_vertical_keys_not_handled(self, tab):
        view = FormView(tab, "Empty", [])
        assert await view.handle(Key.down) is False
        assert view.active_component is view.menu


class TestFormViewRender:

    def test_menu_focused_renders_last(self, view, output):
        view.render()
        assert output.cursor == (7, output.menu_row)
        assert output.text_at(output.content_start_row).startswith("Name")
        assert output.text_at(output.content_start_row).endswith(": ")

    @pytest.mark.asyncio
    async def test_form_focused_renders_last(self, view, output):
        await view.handle(Key.down)
        await view.handle("A")
        view.render()
        assert output.cursor == (23, output.content_start_row)
        assert output.text_at(output.content_start_row).endswith("> A")
        assert "\x1b[1m" not in output.writes()[0] + output.writes()[1]
