"""
tui_compose views module.
"""

from tui_compose.views.form_view import FormView
from tui_compose.views.select_view import SelectView
from tui_compose.views.input_view import InputView

__all__ = [
    "FormView",
    "SelectView",
    "InputView",
]
