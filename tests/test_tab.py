"""
Tests for tui_compose.tab.
"""

import logging

import pytest

from conftest import StubView
from tui_compose.history import InMemoryHistoryStore
from tui_compose.models import Severity, Status
from tui_compose.tab import Tab


class TestTabViews:

    def test_initial_view_built_with_tab(self, fake_app, output):
        built = []

        def initial_view(tab):
            built.append(tab)
            return StubView("Start")

        tab = Tab(fake_app, output, initial_view)
        assert built == [tab]
        assert tab.active_view.title == "Start"
        assert tab.view_depth == 0

    def test_push_and_pop(self, tab):
        second = StubView("Second")
        tab.push_view(second)
        assert tab.active_view is second
        assert tab.view_depth == 1

        assert tab.pop_view() is second
        assert tab.active_view.title == "Home"
        assert tab.view_depth == 0

    def test_pop_initial_view_is_ignored(self, tab, caplog):
        initial = tab.active_view
        with caplog.at_level(logging.WARNING, logger="tui_compose.tab"):
            assert tab.pop_view() is None
        assert tab.active_view is initial
        assert "initial view" in caplog.text

    def test_replace_view(self, tab):
        tab.push_view(StubView("Second"))
        tab.replace_view(StubView("Third"))
        assert tab.active_view.title == "Third"
        assert tab.view_depth == 1

    def test_quit_goes_to_app(self, tab, fake_app):
        tab.quit()
        assert fake_app.quit_count == 1

    def test_default_history_store(self, tab):
        assert isinstance(tab.history_store, InMemoryHistoryStore)

    def test_shared_history_store(self, fake_app, output):
        store = InMemoryHistoryStore()
        tab = Tab(fake_app, output, lambda tab: StubView(), store)
        assert tab.history_store is store


class TestTabStatus:

    def test_welcome_status(self, tab):
        assert tab.status == Status(severity=Severity.INFO, message="Welcome")

    def test_higher_severity_wins(self, tab):
        tab.set_warning("careful")
        tab.set_info("hello")
        assert tab.status.severity == Severity.WARNING
        assert tab.status.message == "careful"

    def test_same_severity_replaces(self, tab):
        tab.set_warning("one")
        tab.set_warning("two")
        assert tab.status.message == "two"

    def test_error_always_wins(self, tab):
        tab.set_error("first")
        tab.set_warning("ignored")
        tab.set_info("ignored too")
        assert tab.status.message == "first"
        tab.set_error("second")
        assert tab.status == Status(severity=Severity.ERROR, message="second")

    @pytest.mark.asyncio
    async def test_handle_clears_status_before_dispatch(self, tab):
        tab.set_error("old")
        await tab.handle("x")
        assert tab.status == Status()

    @pytest.mark.asyncio
    async def test_status_set_while_handling_survives(self, make_tab):
        class WarningView(StubView):
            def __init__(self, tab):
                super().__init__()
                self._tab = tab

            async def handle(self, key):
                self._tab.set_info("info")
                self._tab.set_warning("warning")
                self._tab.set_info("info again")
                return True

        tab = make_tab(WarningView)
        assert await tab.handle("x") is True
        assert tab.status == Status(severity=Severity.WARNING, message="warning")

    @pytest.mark.asyncio
    async def test_handle_returns_view_result(self, make_tab):
        handled = make_tab(lambda tab: StubView(handled=True))
        unhandled = make_tab()
        assert await handled.handle("x") is True
        assert await unhandled.handle("x") is False
        assert handled.active_view.keys == ["x"]

    def test_state_message(self, tab):
        tab.state_message = "[2/3]"
        assert tab.state_message == "[2/3]"
        tab.state_message = None
        assert tab.state_message == ""


class TestTabRender:

    def test_renders_status_then_active_view(self, tab, output):
        tab.state_message = "[1/2]"
        tab.render()
        status_line = output.text_at(output.status_row)
        assert status_line.startswith("Welcome")
        assert status_line.endswith("[1/2]")
        assert len(status_line) == output.width
        assert tab.active_view.renders == [False]
        assert output.cursor == (0, output.content_start_row)

    def test_status_colored_by_severity(self, tab, output):
        tab.set_error("boom")
        tab.render()
        assert output.writes()[0].startswith("\x1b[41m")

    def test_long_status_truncated(self, tab, output):
        tab.set_info("x" * 200)
        tab.render()
        assert output.text_at(output.status_row) == "x" * output.width
