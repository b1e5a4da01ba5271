"""
Text measurement and ANSI emphasis helpers used by component renders.

Key functions:
- visible_width: Calculate visible width ignoring ANSI codes
- pad_right: Pad text with spaces to a visible width
- truncate_to_width: Clip text to a visible width preserving ANSI codes
"""

from __future__ import annotations

import re

from wcwidth import wcwidth

from tui_compose.models import Severity


# ANSI escape sequence patterns
ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[a-zA-Z]")
OSC_ESCAPE = re.compile(r"\x1b\][^\x07\x1b]*[\x07\x1b\\]")

_STATUS_STYLES = {
    Severity.ERROR: ("\x1b[41m\x1b[33m", "\x1b[39m\x1b[49m"),
    Severity.WARNING: ("\x1b[43m\x1b[30m", "\x1b[39m\x1b[49m"),
    Severity.INFO: ("\x1b[44m\x1b[37m", "\x1b[39m\x1b[49m"),
    Severity.NONE: ("\x1b[47m\x1b[30m", "\x1b[39m\x1b[49m"),
}


def _strip_ansi(text: str) -> str:
    """Remove all ANSI/OSC escape sequences from text."""
    text = ANSI_ESCAPE.sub("", text)
    text = OSC_ESCAPE.sub("", text)
    return text


def visible_width(text: str) -> int:
    """
    Calculate the visible width of text, ignoring ANSI codes.

    Example:
        >>> visible_width("\x1b[31mHello\x1b[0m")
        5
    """
    clean = _strip_ansi(text)
    return sum(max(0, wcwidth(c)) for c in clean)


def pad_right(text: str, width: int) -> str:
    """Pad text with spaces on the right up to the given visible width."""
    return text + " " * max(0, width - visible_width(text))


def truncate_to_width(text: str, max_width: int) -> str:
    """
    Clip text to max_width visible columns, keeping ANSI codes intact.

    Args:
        text: Input text possibly containing ANSI codes
        max_width: Maximum visible width

    Returns:
        Clipped text
    """
    if max_width <= 0:
        return ""
    if visible_width(text) <= max_width:
        return text

    result: list[str] = []
    current_width = 0
    i = 0
    while i < len(text):
        if text[i] == "\x1b":
            match = ANSI_ESCAPE.match(text, i)
            if match:
                result.append(match.group(0))
                i = match.end()
                continue
        char_width = max(0, wcwidth(text[i]))
        if current_width + char_width > max_width:
            break
        result.append(text[i])
        current_width += char_width
        i += 1
    return "".join(result)


def bold(text: str) -> str:
    return f"\x1b[1m{text}\x1b[22m"


def inverse(text: str) -> str:
    return f"\x1b[7m{text}\x1b[27m"


def blue(text: str) -> str:
    return f"\x1b[34m{text}\x1b[39m"


def gray(text: str) -> str:
    return f"\x1b[90m{text}\x1b[39m"


def heading(text: str) -> str:
    """White on blue, used for list column headings."""
    return f"\x1b[44m\x1b[37m{text}\x1b[39m\x1b[49m"


def status_style(severity: Severity, text: str) -> str:
    """Color a status bar message according to its severity."""
    start, end = _STATUS_STYLES[severity]
    return f"{start}{text}{end}"
