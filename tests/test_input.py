"""
Tests for tui_compose.components.input.
"""

from unittest.mock import AsyncMock

import pytest

from conftest import StubView
from tui_compose.components.input import Input
from tui_compose.keys import Key


class TestInputEditing:

    @pytest.mark.asyncio
    async def test_printable_characters_append(self, tab):
        field = Input(tab)
        for key in "abc":
            assert await field.handle(key) is True
        assert field.value == "abc"

    @pytest.mark.asyncio
    async def test_backspace_removes_last_character(self, tab):
        field = Input(tab, value="abc")
        assert await field.handle(Key.backspace) is True
        assert field.value == "ab"

    @pytest.mark.asyncio
    async def test_backspace_on_empty_value(self, tab):
        field = Input(tab)
        assert await field.handle(Key.backspace) is True
        assert field.value == ""

    @pytest.mark.asyncio
    async def test_control_character_rejected(self, tab):
        field = Input(tab)
        assert await field.handle("\x01") is False
        assert field.value == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", [Key.up, Key.down, Key.left, Key.right, Key.page_up])
    async def test_short_sequences_rejected(self, tab, key):
        field = Input(tab, value="x")
        assert await field.handle(key) is False
        assert field.value == "x"

    @pytest.mark.asyncio
    async def test_paste_appends_whole_chunk(self, tab):
        field = Input(tab, value="say ")
        assert await field.handle("hello world") is True
        assert field.value == "say hello world"

    @pytest.mark.asyncio
    async def test_short_paste_is_lost(self, tab):
        field = Input(tab)
        assert await field.handle("abc") is False
        assert field.value == ""


class TestInputTypes:

    @pytest.mark.asyncio
    async def test_integer_accepts_digits(self, tab):
        field = Input(tab, type="integer")
        assert await field.handle("4") is True
        assert await field.handle("20") is True
        assert field.value == "420"

    @pytest.mark.asyncio
    async def test_integer_rejects_mixed_chunk(self, tab):
        field = Input(tab, value="1", type="integer")
        assert await field.handle("2a") is False
        assert await field.handle("x") is False
        assert field.value == "1"

    def test_integer_rejects_non_digit_default(self, tab):
        with pytest.raises(ValueError):
            Input(tab, value="12b", type="integer")

    def test_integer_value_setter(self, tab):
        field = Input(tab, type="integer")
        field.value = "99"
        assert field.value == "99"
        with pytest.raises(ValueError):
            field.value = "-1"

    @pytest.mark.asyncio
    async def test_password_keeps_real_value(self, tab):
        field = Input(tab, type="password")
        for key in "secret":
            await field.handle(key)
        assert field.value == "secret"
        assert field.type == "password"


class TestInputControlKeys:

    @pytest.mark.asyncio
    async def test_enter_calls_hook_with_value(self, tab):
        on_enter = AsyncMock()
        field = Input(tab, on_enter, value="done")
        assert await field.handle(Key.enter) is True
        on_enter.assert_awaited_once_with("done")
        assert field.value == "done"

    @pytest.mark.asyncio
    async def test_enter_without_hook(self, tab):
        field = Input(tab, value="done")
        assert await field.handle(Key.enter) is True

    @pytest.mark.asyncio
    async def test_escape_clears_value(self, tab):
        tab.push_view(StubView("Second"))
        field = Input(tab, value="abc")
        assert await field.handle(Key.escape) is True
        assert field.value == ""
        assert tab.view_depth == 1

    @pytest.mark.asyncio
    async def test_escape_on_empty_value_pops_view(self, tab):
        tab.push_view(StubView("Second"))
        field = Input(tab)
        assert await field.handle(Key.escape) is True
        assert tab.view_depth == 0


class TestInputRender:

    def test_active_prompt_and_cursor(self, tab, output):
        field = Input(tab, value="abc")
        field.render()
        assert output.text_at(output.content_start_row) == "> abc"
        assert output.cursor == (5, output.content_start_row)

    def test_inactive_prompt_leaves_cursor(self, tab, output):
        field = Input(tab, value="abc")
        field.render(True)
        assert output.text_at(output.content_start_row) == ": abc"
        assert output.cursor == (0, output.content_start_row)

    def test_render_at_position(self, tab, output):
        field = Input(tab, value="ab")
        field.render(False, 20, 5)
        assert output.text_at(5) == " " * 20 + "> ab"
        assert output.cursor == (24, 5)

    def test_password_is_masked(self, tab, output):
        field = Input(tab, value="hunter2", type="password")
        field.render()
        assert output.text_at(output.content_start_row) == "> *******"

    def test_long_value_wraps(self, tab, output):
        # 78 cells for the value on an 80 column output
        field = Input(tab, value="x" * 100)
        field.render()
        row = output.content_start_row
        assert output.text_at(row) == "> " + "x" * 78
        assert output.text_at(row + 1) == "  " + "x" * 22
        assert output.cursor == (24, row + 1)

    def test_value_filling_row_moves_cursor_to_next_row(self, tab, output):
        field = Input(tab, value="x" * 78)
        field.render()
        assert output.cursor == (2, output.content_start_row + 1)

    def test_no_wrap_scrolls_to_tail(self, tab, output):
        # At column 20 there are 58 cells for the value
        value = "".join(str(i % 10) for i in range(70))
        field = Input(tab, value=value)
        field.render(False, 20, 3, False)
        line = output.text_at(3)[20:]
        assert line == "> " + value[70 - 57:] + " "
        assert output.cursor == (20 + 2 + 57, 3)
        assert 4 not in output.rows

    def test_no_wrap_short_value(self, tab, output):
        field = Input(tab, value="short")
        field.render(False, 20, 3, False)
        assert output.text_at(3)[20:] == "> short"
        assert output.cursor == (27, 3)
