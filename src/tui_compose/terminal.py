"""
Terminal implementations of the Output surface and the key input source.
"""

from __future__ import annotations

import asyncio
import codecs
import shutil
import sys
from typing import Any, AsyncIterator, TextIO

from tui_compose.keys import normalize_key
from tui_compose.output import Output


class TerminalOutput(Output):
    """
    Output drawing to a real terminal with ANSI sequences.

    The window size is read at construction and again on ``resize()``.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._width = 80
        self._height = 24
        self.resize()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def resize(self) -> None:
        """Re-read the window size. Does not redraw anything."""
        size = shutil.get_terminal_size((80, 24))
        self._width = size.columns
        self._height = size.lines

    def clear(self) -> None:
        self.write("\x1b[3J\x1b[2J\x1b[H")

    def cursor_to(self, column: int, row: int) -> None:
        self.write(f"\x1b[{row + 1};{column + 1}H")

    def write(self, text: str) -> None:
        self._stream.write(text)

    def flush(self) -> None:
        self._stream.flush()


class TerminalInput:
    """
    Key source reading stdin in raw mode.

    Each chunk read from stdin becomes one key token, so a paste arrives as
    a single long token. Use as an async context manager so the terminal
    mode is always restored.
    """

    def __init__(self, stdin: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._old_term_settings: Any = None
        self._transport: asyncio.BaseTransport | None = None
        self._reader: asyncio.StreamReader | None = None

    def _enable_raw_mode(self) -> None:
        if sys.platform == "win32":
            return

        import termios
        import tty

        try:
            self._old_term_settings = termios.tcgetattr(self._stdin.fileno())
            tty.setraw(self._stdin.fileno())
        except (termios.error, OSError):
            # Not a tty (piped input); keys are read as they come
            self._old_term_settings = None

    def _disable_raw_mode(self) -> None:
        if sys.platform == "win32" or self._old_term_settings is None:
            return

        import termios

        try:
            termios.tcsetattr(self._stdin.fileno(), termios.TCSADRAIN, self._old_term_settings)
        except (termios.error, OSError):
            pass
        self._old_term_settings = None

    async def __aenter__(self) -> TerminalInput:
        self._enable_raw_mode()
        loop = asyncio.get_running_loop()
        reader = asyncio.StreamReader()
        protocol = asyncio.StreamReaderProtocol(reader)
        self._transport, _ = await loop.connect_read_pipe(lambda: protocol, self._stdin)
        self._reader = reader
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._transport is not None:
            self._transport.close()
            self._transport = None
        self._reader = None
        self._disable_raw_mode()

    async def keys(self) -> AsyncIterator[str]:
        """Yield one key token per chunk until stdin closes."""
        if self._reader is None:
            raise RuntimeError("TerminalInput must be entered before reading keys")
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        while True:
            data = await self._reader.read(1024)
            if not data:
                return
            text = decoder.decode(data)
            if text:
                yield normalize_key(text)
