"""Coloured status messages written to a console stream."""

from __future__ import annotations

import sys
from typing import IO, Callable, Optional

COLOR_BLACK = "\033[0;30m"
COLOR_GRAY = "\033[1;30m"
COLOR_RED = "\033[0;31m"
COLOR_BRIGHT_RED = "\033[1;31m"
COLOR_GREEN = "\033[0;32m"
COLOR_BRIGHT_GREEN = "\033[1;32m"
COLOR_YELLOW = "\033[0;33m"
COLOR_BRIGHT_YELLOW = "\033[1;33m"
COLOR_BLUE = "\033[0;34m"
COLOR_BRIGHT_BLUE = "\033[1;34m"
COLOR_MAGENTA = "\033[0;35m"
COLOR_BRIGHT_MAGENTA = "\033[1;35m"
COLOR_CYAN = "\033[0;36m"
COLOR_BRIGHT_CYAN = "\033[1;36m"
COLOR_WHITE = "\033[0;37m"
COLOR_BRIGHT_WHITE = "\033[1;37m"
COLOR_RESET = "\033[0m"

_COLOR_META = COLOR_BRIGHT_WHITE
_COLOR_MESSAGE = COLOR_CYAN
_COLOR_MESSAGE_TEXT = COLOR_WHITE
_COLOR_SUCCESS = COLOR_BRIGHT_GREEN
_COLOR_SUCCESS_TEXT = COLOR_WHITE
_COLOR_WARNING = COLOR_BRIGHT_YELLOW
_COLOR_WARNING_TEXT = COLOR_WHITE
_COLOR_ERROR = COLOR_RED
_COLOR_ERROR_TEXT = COLOR_RED


class _Discard:
    """A writer that throws away everything written to it."""

    def write(self, data: str) -> int:
        return len(data)

    def flush(self) -> None:
        return None


class Console:
    """Writes decorated messages to an output stream (standard error by default)."""

    def __init__(
        self,
        output: Optional[IO[str]] = None,
        exit_handler: Callable[[int], object] = sys.exit,
    ) -> None:
        self._output = output
        self.exit_handler = exit_handler

    @property
    def output(self) -> IO[str]:
        """The stream messages go to."""
        if self._output is None:
            return sys.stderr
        return self._output

    @output.setter
    def output(self, stream: Optional[IO[str]]) -> None:
        self._output = stream

    def _tagged(self, symbol: str, symbol_color: str, text_color: str, text: str) -> None:
        line = (
            f"{_COLOR_META}[{symbol_color}{symbol}{_COLOR_META}]"
            f"{text_color} {text}{COLOR_RESET}\n"
        )
        self.output.write(line)

    def message(self, text: str) -> None:
        """Display an informative message."""
        self._tagged("*", _COLOR_MESSAGE, _COLOR_MESSAGE_TEXT, text)

    def success(self, text: str) -> None:
        """Display a success message."""
        self._tagged("+", _COLOR_SUCCESS, _COLOR_SUCCESS_TEXT, text)

    def warning(self, text: str) -> None:
        """Display a warning message."""
        self._tagged("!", _COLOR_WARNING, _COLOR_WARNING_TEXT, text)

    def error(self, text: str) -> None:
        """Display an error message."""
        self._tagged("X", _COLOR_ERROR, _COLOR_ERROR_TEXT, text)

    def printf(self, text: str) -> None:
        """Write text without any decoration."""
        self.output.write(text)

    def fatal(self, text: str) -> None:
        """Display a fatal error in red and exit the process."""
        self.output.write(COLOR_RED + text + COLOR_RESET)
        self.exit_handler(-1)

    def silence(self) -> None:
        """Discard all further output."""
        self._output = _Discard()