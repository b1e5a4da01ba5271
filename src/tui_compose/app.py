"""
App - the thin bootstrap around a Tab.

Draws the title row, runs one handle-then-render cycle per key and stops
when a component asks to quit.
"""

from __future__ import annotations

import asyncio
import logging
import signal
import sys
from typing import TYPE_CHECKING, AsyncIterable, Callable

from tui_compose.config import configure_logging
from tui_compose.history import HistoryStore, InMemoryHistoryStore
from tui_compose.models import Status
from tui_compose.output import Output
from tui_compose.tab import Tab
from tui_compose.terminal import TerminalInput, TerminalOutput
from tui_compose.utils import pad_right, truncate_to_width

if TYPE_CHECKING:
    from tui_compose.component import View

logger = logging.getLogger(__name__)


class App:
    """
    Application owning the tab, the output and the input loop.

    Args:
        title: Shown right-aligned in the title row
        initial_view: Factory building the first view of the tab
        output: Drawing surface; a TerminalOutput by default
        history_store: Input history for the session
    """

    def __init__(
        self,
        title: str,
        initial_view: Callable[[Tab], View],
        output: Output | None = None,
        history_store: HistoryStore | None = None,
    ) -> None:
        self._title = title
        self._output = output if output is not None else TerminalOutput()
        self._history_store = history_store if history_store is not None else InMemoryHistoryStore()
        self._stopped = False
        self._handling = False
        self._tab = Tab(self, self._output, initial_view, self._history_store)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def title(self) -> str:
        return self._title

    @property
    def output(self) -> Output:
        return self._output

    @property
    def active_tab(self) -> Tab:
        return self._tab

    @property
    def active_view(self) -> View:
        return self._tab.active_view

    @property
    def view_depth(self) -> int:
        return self._tab.view_depth

    @property
    def status(self) -> Status:
        return self._tab.status

    @property
    def state_message(self) -> str:
        return self._tab.state_message

    @state_message.setter
    def state_message(self, state_message: str) -> None:
        self._tab.state_message = state_message

    @property
    def stopped(self) -> bool:
        return self._stopped

    # -------------------------------------------------------------------------
    # Delegation to the active tab
    # -------------------------------------------------------------------------

    def set_info(self, message: str) -> None:
        self._tab.set_info(message)

    def set_warning(self, message: str) -> None:
        self._tab.set_warning(message)

    def set_error(self, message: str) -> None:
        self._tab.set_error(message)

    def push_view(self, view: View) -> None:
        self._tab.push_view(view)

    def pop_view(self) -> View | None:
        return self._tab.pop_view()

    def replace_view(self, view: View) -> None:
        self._tab.replace_view(view)

    def quit(self) -> None:
        logger.info("Quit requested")
        self._stopped = True

    # -------------------------------------------------------------------------
    # Input and rendering
    # -------------------------------------------------------------------------

    async def handle(self, key: str) -> bool:
        self._handling = True
        try:
            return await self._tab.handle(key)
        finally:
            self._handling = False

    def render(self) -> None:
        self._output.clear()
        self._render_title()
        self._tab.render()
        self._output.flush()

    def _render_title(self) -> None:
        output = self._output
        tabs = truncate_to_width(f" {self._tab.active_view.title} |", max(0, output.width - len(self._title) - 1))
        output.cursor_to(0, 0)
        output.write(pad_right(tabs, output.width - len(self._title)) + self._title)

    def _on_resize(self) -> None:
        self._output.resize()
        # A key in flight renders when it completes
        if not self._handling and not self._stopped:
            self.render()

    async def run(self, keys: AsyncIterable[str] | None = None) -> None:
        """
        Run the input loop until quit or the key source ends.

        Args:
            keys: Source of key tokens; the terminal's stdin by default
        """
        if keys is not None:
            await self._run(keys)
            return

        configure_logging()
        loop = asyncio.get_running_loop()
        watch_resize = sys.platform != "win32"
        if watch_resize:
            loop.add_signal_handler(signal.SIGWINCH, self._on_resize)
        try:
            async with TerminalInput() as terminal_input:
                await self._run(terminal_input.keys())
        finally:
            if watch_resize:
                loop.remove_signal_handler(signal.SIGWINCH)

    async def _run(self, keys: AsyncIterable[str]) -> None:
        self._stopped = False
        self.render()
        try:
            async for key in keys:
                await self.handle(key)
                if self._stopped:
                    break
                self.render()
        except Exception:
            # Errors should not reach this level; a coder needs to look
            logger.exception("Unhandled error while handling input")
            self._output.clear()
            raise
        if self._stopped:
            self._output.clear()
            self._output.write("Bye!\n")
