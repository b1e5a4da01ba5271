"""
Output surface consumed by every render method.

The layout is a fixed budget: one title row, the menu rows, the view
content, then the status rows at the bottom.
"""

from abc import ABC, abstractmethod

from tui_compose.config import MENU_HEIGHT, STATUS_HEIGHT, TITLE_HEIGHT


class Output(ABC):
    """
    Abstract drawing surface.

    Implementations provide the primitive operations; the layout rows are
    derived from the current ``width`` and ``height``.
    """

    @property
    @abstractmethod
    def width(self) -> int:
        """Number of columns in the console window."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Number of rows in the console window."""
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def cursor_to(self, column: int, row: int) -> None:
        """Move the cursor to the zero-based column and row."""
        ...

    @abstractmethod
    def write(self, text: str) -> None:
        """Write text at the current cursor position."""
        ...

    @property
    def menu_row(self) -> int:
        """The row at which the menu is rendered."""
        return TITLE_HEIGHT

    @property
    def content_start_row(self) -> int:
        """The first row in which view content can be rendered."""
        return self.menu_row + MENU_HEIGHT

    @property
    def content_height(self) -> int:
        """The number of rows available for view content."""
        return self.height - TITLE_HEIGHT - MENU_HEIGHT - STATUS_HEIGHT

    @property
    def status_row(self) -> int:
        return self.height - STATUS_HEIGHT

    def flush(self) -> None:
        """Push buffered output to the device, if the surface buffers."""
        pass

    def resize(self) -> None:
        """Re-read the surface dimensions after a window size change."""
        pass
