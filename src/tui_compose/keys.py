"""
Key vocabulary for terminal input.

A key token is a string. Named keys are the canonical terminal sequences
exposed on ``Key``; anything else is literal text (a printable character,
an unrecognized short control sequence, or a pasted chunk).

API:
- Key - Helper object holding the canonical sequence of each named key
- parse_key(data) - Return the name of a named key, or None for literal text
- normalize_key(data) - Map alternate encodings onto the canonical sequence
- matches_key(data, key) - Check if input is the given named key
"""

from __future__ import annotations

from typing import Literal

KeyName = Literal[
    "enter", "escape", "tab", "shiftTab", "up", "down", "left", "right",
    "pageUp", "pageDown", "backspace",
]


# =============================================================================
# Key Helper Class
# =============================================================================

class _KeyHelper:
    """
    Canonical sequences for the named keys.

    Usage:
    - Key.enter, Key.escape, Key.tab, Key.shift_tab
    - Key.up, Key.down, Key.left, Key.right
    - Key.page_up, Key.page_down, Key.backspace
    """

    enter = "\r"
    escape = "\x1b"
    tab = "\t"
    shift_tab = "\x1b[Z"
    up = "\x1b[A"
    down = "\x1b[B"
    right = "\x1b[C"
    left = "\x1b[D"
    page_up = "\x1b[5~"
    page_down = "\x1b[6~"
    backspace = "\x7f"


Key = _KeyHelper()


# =============================================================================
# Constants
# =============================================================================

NAMED_KEYS: dict[str, KeyName] = {
    Key.enter: "enter",
    Key.escape: "escape",
    Key.tab: "tab",
    Key.shift_tab: "shiftTab",
    Key.up: "up",
    Key.down: "down",
    Key.right: "right",
    Key.left: "left",
    Key.page_up: "pageUp",
    Key.page_down: "pageDown",
    Key.backspace: "backspace",
}

# Other encodings terminals send for the same keys
LEGACY_SEQUENCES: dict[str, str] = {
    "\n": Key.enter,
    "\r\n": Key.enter,
    "\x1bOA": Key.up,
    "\x1bOB": Key.down,
    "\x1bOC": Key.right,
    "\x1bOD": Key.left,
    "\x1b[1;2Z": Key.shift_tab,
    "\x1b[[5~": Key.page_up,
    "\x1b[[6~": Key.page_down,
    "\x08": Key.backspace,
}


def normalize_key(data: str) -> str:
    """Return the canonical sequence for data, or data unchanged if literal."""
    return LEGACY_SEQUENCES.get(data, data)


def parse_key(data: str) -> KeyName | None:
    """
    Parse input data and return the key name.

    Args:
        data: Raw input token

    Returns:
        Name like "enter" or "pageDown", or None when data is literal text
    """
    return NAMED_KEYS.get(normalize_key(data))


def is_named_key(data: str) -> bool:
    return parse_key(data) is not None


def matches_key(data: str, key: str) -> bool:
    """
    Check if input data is the given named key.

    Args:
        data: Raw input token
        key: A canonical sequence from ``Key``
    """
    return normalize_key(data) == key
