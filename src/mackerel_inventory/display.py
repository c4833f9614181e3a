# Copyright (c) 2024 Mackerel Inventory Contributors
# MIT License

"""
Terminal diagnostics.

Everything here writes to stderr. Stdout is reserved for the inventory
document, which Ansible parses as JSON.
"""

import os
import sys
from typing import Optional, TextIO


def is_tty(stream: Optional[TextIO] = None) -> bool:
    """Check if the given stream (or stderr) is a TTY."""
    if stream is None:
        stream = sys.stderr

    try:
        return stream.isatty()
    except AttributeError:
        return False


def supports_color(stream: Optional[TextIO] = None) -> bool:
    """
    Check if the stream supports ANSI color codes.

    Honours NO_COLOR and FORCE_COLOR; a dumb terminal gets no color.
    """
    if stream is None:
        stream = sys.stderr

    # Check for explicit disable
    if os.environ.get("NO_COLOR"):
        return False

    # Check for explicit enable
    if os.environ.get("FORCE_COLOR"):
        return True

    if not is_tty(stream):
        return False

    return os.environ.get("TERM", "") != "dumb"


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    DIM = "\033[2m"
    RED = "\033[31m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"


class Display:
    """
    Verbosity-aware printer for warnings, errors and debug messages.

    Warnings and errors are always printed. Debug messages are printed when
    the verbosity (number of -v flags) reaches their level.
    """

    def __init__(self, verbosity: int = 0, stream: Optional[TextIO] = None):
        self.verbosity = verbosity
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so that a replaced sys.stderr is picked up
        return self._stream or sys.stderr

    def _wrap(self, text: str, code: str) -> str:
        if not supports_color(self.stream):
            return text
        return code + text + Colors.RESET

    def _emit(self, text: str) -> None:
        print(text, file=self.stream)

    def warning(self, msg: str) -> None:
        """Print a warning message."""
        self._emit(self._wrap(f"[WARNING]: {msg}", Colors.YELLOW))

    def error(self, msg: str) -> None:
        """Print an error message."""
        self._emit(self._wrap(f"ERROR: {msg}", Colors.RED))

    def debug(self, msg: str, level: int = 1) -> None:
        """Print a message if verbosity is at least ``level``."""
        if self.verbosity >= level:
            self._emit(self._wrap(msg, Colors.CYAN if level < 3 else Colors.DIM))
