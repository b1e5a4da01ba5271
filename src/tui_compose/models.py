from __future__ import annotations

from enum import IntEnum
from typing import Any, Awaitable, Callable, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Direction = Literal[-1, 1]
"""Navigation direction: negative is backwards/up, positive is forwards/down."""

InputType = Literal["string", "integer", "password"]

Action = Callable[[], Awaitable[None]]


class Severity(IntEnum):
    """Status severity. A higher value wins within one input cycle."""

    NONE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class Status(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    severity: Severity = Severity.NONE
    message: str = ""


class MenuItem(BaseModel):
    """
    An item in a Menu.

    Each item has a single character shortcut ``key`` that must appear in
    its ``label``, ``help`` text shown in the status bar, an optional async
    ``execute`` action and an optional ``visible`` predicate that is checked
    every time the menu is drawn or navigated.
    """

    model_config = ConfigDict(populate_by_name=True)
    key: str
    label: str
    help: str = ""
    execute: Action | None = None
    visible: Callable[[], bool] | None = None

    @field_validator("key")
    @classmethod
    def _single_printable_character(cls, key: str) -> str:
        if len(key) != 1 or not key.isprintable():
            raise ValueError(f"Menu key must be a single printable character, got {key!r}")
        return key

    @model_validator(mode="after")
    def _key_in_label(self) -> MenuItem:
        if self.key not in self.label:
            raise ValueError(f"Key '{self.key}' not found in menu option label text '{self.label}'")
        return self

    @property
    def key_position(self) -> int:
        return self.label.index(self.key)

    def is_visible(self) -> bool:
        return self.visible is None or self.visible()


class FormFieldDescription(BaseModel):
    """Construction-time description of a single Form field."""

    model_config = ConfigDict(populate_by_name=True)
    label: str
    value: str = Field(default="", alias="default")
    type: InputType = "string"


class ListColumn(BaseModel):
    """
    A column displayed in a List.

    ``value`` receives a list item and its index and returns the text shown
    in this column.
    """

    model_config = ConfigDict(populate_by_name=True)
    heading: str
    width: int = Field(ge=0)
    value: Callable[[Any, int], str]


class SelectViewItem(BaseModel):
    """A row in a SelectView; ``execute`` runs when the row is chosen."""

    model_config = ConfigDict(populate_by_name=True)
    label: str
    execute: Action | None = None
