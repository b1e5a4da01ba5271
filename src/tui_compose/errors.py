"""Exceptions raised by tui_compose."""


class ConfigurationError(ValueError):
    """A component was set up with an invalid combination of options."""


class DuplicateKeyError(ConfigurationError):
    """A menu item was added with a key already used in the same menu."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Cannot create menu with duplicate key '{key}'")
        self.key = key


class UnsupportedInputError(Exception):
    """A display-only component was asked to handle input."""
