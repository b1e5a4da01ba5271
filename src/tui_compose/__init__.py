"""
tui-compose: Terminal UI composition toolkit

Interactive components (menus, forms, lists, text panes) composed into
views on a per-tab view stack, with one component owning input at a time.
"""

from tui_compose.component import Component, View
from tui_compose.tab import Tab
from tui_compose.app import App
from tui_compose.output import Output
from tui_compose.terminal import TerminalInput, TerminalOutput
from tui_compose.keys import (
    Key,
    KeyName,
    parse_key,
    normalize_key,
    matches_key,
    is_named_key,
)
from tui_compose.models import (
    Direction,
    FormFieldDescription,
    InputType,
    ListColumn,
    MenuItem,
    SelectViewItem,
    Severity,
    Status,
)
from tui_compose.errors import ConfigurationError, DuplicateKeyError, UnsupportedInputError
from tui_compose.history import HistoryStore, InMemoryHistoryStore

from tui_compose.components import (
    Input,
    Menu,
    Form,
    FormField,
    List,
    Text,
    InputHelp,
)
from tui_compose.views import (
    FormView,
    SelectView,
    InputView,
)

__all__ = [
    "Component",
    "View",
    "Tab",
    "App",
    "Output",
    "TerminalInput",
    "TerminalOutput",
    "Key",
    "KeyName",
    "parse_key",
    "normalize_key",
    "matches_key",
    "is_named_key",
    "Direction",
    "FormFieldDescription",
    "InputType",
    "ListColumn",
    "MenuItem",
    "SelectViewItem",
    "Severity",
    "Status",
    "ConfigurationError",
    "DuplicateKeyError",
    "UnsupportedInputError",
    "HistoryStore",
    "InMemoryHistoryStore",
    "Input",
    "Menu",
    "Form",
    "FormField",
    "List",
    "Text",
    "InputHelp",
    "FormView",
    "SelectView",
    "InputView",
]
