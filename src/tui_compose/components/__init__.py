"""
tui_compose components module.
"""

from tui_compose.components.input import Input
from tui_compose.components.menu import Menu
from tui_compose.components.form import Form, FormField
from tui_compose.components.list import List
from tui_compose.components.text import Text
from tui_compose.components.input_help import InputHelp

__all__ = [
    "Input",
    "Menu",
    "Form",
    "FormField",
    "List",
    "Text",
    "InputHelp",
]
