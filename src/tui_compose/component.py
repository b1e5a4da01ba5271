"""
Component interface for tui_compose.

Every renderable, interactive piece of the UI implements ``Component``:
``render`` draws it to the Output and ``handle`` offers it a key token.
Views are components that fill the content area of a Tab and carry a title.
"""

from abc import ABC, abstractmethod


class Component(ABC):
    """
    Base component interface.

    All components must implement this interface.
    """

    @abstractmethod
    def render(self, inactive: bool = False) -> None:
        """
        Render the component to the output.

        Args:
            inactive: True when the component is drawn but is not receiving
                input. Inactive components look different (for example a
                menu without bold shortcut keys) and never move the cursor.
        """
        ...

    @abstractmethod
    async def handle(self, key: str) -> bool:
        """
        Handle a key token while this component has focus.

        Args:
            key: A named key sequence or a chunk of literal text

        Returns:
            True if the key was consumed and no other component should
            respond to it
        """
        ...


class View(Component):
    """
    Base class for views.

    A view renders as the full content of a Tab, roughly a page. Its title
    is shown in the app title row.
    """

    def __init__(self, title: str) -> None:
        self._title = title

    @property
    def title(self) -> str:
        return self._title
