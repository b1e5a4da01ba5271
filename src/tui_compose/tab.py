"""
Tab - an ordered stack of views with a status bar.

Only the top view is active. Every input cycle starts with a cleared status
so a component that wants a message shown after a key must set it while
handling that key.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Protocol

from tui_compose.history import HistoryStore, InMemoryHistoryStore
from tui_compose.models import Severity, Status
from tui_compose.utils import pad_right, status_style, truncate_to_width

if TYPE_CHECKING:
    from tui_compose.component import View
    from tui_compose.output import Output

logger = logging.getLogger(__name__)


class Quittable(Protocol):
    """The owner of a Tab; terminates the application."""

    def quit(self) -> None: ...


class Tab:
    """
    A stack of views sharing one status bar.

    Args:
        app: Owner that implements ``quit()``
        output: Surface that views and their components draw to
        initial_view: Factory building the bottom view of the stack
        history_store: Input history shared by the views of this tab
    """

    def __init__(
        self,
        app: Quittable,
        output: Output,
        initial_view: Callable[[Tab], View],
        history_store: HistoryStore | None = None,
    ) -> None:
        self._app = app
        self.output = output
        self.history_store = history_store if history_store is not None else InMemoryHistoryStore()
        self._views: list[View] = []
        self._status = Status(severity=Severity.INFO, message="Welcome")
        self._state_message = ""
        self._views.append(initial_view(self))

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    @property
    def active_view(self) -> View:
        return self._views[-1]

    @property
    def view_depth(self) -> int:
        """Number of views stacked above the initial view."""
        return len(self._views) - 1

    def push_view(self, view: View) -> None:
        logger.debug("Push view %r (depth %d)", view.title, len(self._views))
        self._views.append(view)

    def pop_view(self) -> View | None:
        """Remove the top view. The initial view is never removed."""
        if len(self._views) == 1:
            logger.warning("Ignoring pop of the initial view %r", self._views[0].title)
            return None
        view = self._views.pop()
        logger.debug("Pop view %r (depth %d)", view.title, self.view_depth)
        return view

    def replace_view(self, view: View) -> None:
        logger.debug("Replace view %r with %r", self.active_view.title, view.title)
        self._views[-1] = view

    def quit(self) -> None:
        self._app.quit()

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    @property
    def status(self) -> Status:
        return self._status

    @property
    def state_message(self) -> str:
        return self._state_message

    @state_message.setter
    def state_message(self, state_message: str) -> None:
        self._state_message = state_message or ""

    def _set_status(self, severity: Severity, message: str) -> None:
        if severity < self._status.severity:
            logger.debug("Keeping %s status over %s: %s", self._status.severity.name, severity.name, message)
            return
        self._status = Status(severity=severity, message=message)

    def set_info(self, message: str) -> None:
        self._set_status(Severity.INFO, message)

    def set_warning(self, message: str) -> None:
        self._set_status(Severity.WARNING, message)

    def set_error(self, message: str) -> None:
        self._status = Status(severity=Severity.ERROR, message=message)

    def _clear_status(self) -> None:
        self._status = Status()

    # -------------------------------------------------------------------------
    # Input and rendering
    # -------------------------------------------------------------------------

    async def handle(self, key: str) -> bool:
        """Clear the status and offer the key to the active view."""
        self._clear_status()
        return await self.active_view.handle(key)

    def render(self) -> None:
        self._render_status()
        self.output.cursor_to(0, self.output.content_start_row)
        self.active_view.render(False)

    def _render_status(self) -> None:
        output = self.output
        state_width = len(self._state_message)
        message_width = max(0, output.width - state_width)
        message = truncate_to_width(self._status.message, message_width)
        output.cursor_to(0, output.status_row)
        output.write(status_style(self._status.severity, pad_right(message, message_width)) + self._state_message)
