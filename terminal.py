"""Terminal size providers.

Layout functions never query the terminal themselves; they receive a
TerminalInfoProvider and only call it when no explicit width is given.

Query order of SystemTerminal:
    1. shutil.get_terminal_size (COLUMNS/LINES, then the stdout TTY)
    2. tput cols / tput lines
    3. stty size
"""

import os
import shutil
from typing import Protocol

import config
from errors import ValidationError
from logging_config import get_logger
from models import TerminalSize
from utils import command_exists, is_valid_width, run_command

logger = get_logger(__name__)


class TerminalInfoProvider(Protocol):
    """Anything that can report the terminal size."""

    def get_size(self) -> TerminalSize | None:
        """Return the terminal size or None if it is unavailable."""


class FixedTerminal:
    """Terminal with a fixed, known size (tests, non-interactive callers)."""

    def __init__(self, columns: int, lines: int = 24) -> None:
        self.columns = columns
        self.lines = lines

    def get_size(self) -> TerminalSize | None:
        return TerminalSize(columns=self.columns, lines=self.lines)


class SystemTerminal:
    """Terminal size of the current process."""

    def __init__(self, column_margin: int = config.TERMINAL_COLUMN_MARGIN) -> None:
        self.column_margin = column_margin

    def get_size(self) -> TerminalSize | None:
        """Query the terminal size.

        Returns:
            TerminalSize with the column margin applied, or None if no
            query method worked.
        """
        size = self._query()
        if size is None:
            logger.debug("Terminal size unavailable")
            return None

        columns, lines = size
        logger.debug("Terminal size: %dx%d", columns, lines)
        return TerminalSize(columns=columns - self.column_margin, lines=lines)

    def _query(self) -> tuple[int, int] | None:
        columns, lines = shutil.get_terminal_size(fallback=(0, 0))
        if columns > 0 and lines > 0:
            return columns, lines

        # tput needs $TERM; set it for the child process only
        env = {**os.environ, "TERM": os.environ.get("TERM") or config.DUMB_TERMINAL}

        if command_exists("tput"):
            cols_out = run_command(["tput", "cols"], env=env)
            lines_out = run_command(["tput", "lines"], env=env)
            if cols_out and lines_out and cols_out.isdigit() and lines_out.isdigit():
                return int(cols_out), int(lines_out)

        if command_exists("stty"):
            output = run_command(["stty", "size"], env=env)
            if output:
                parts = output.split()
                if len(parts) == 2 and all(part.isdigit() for part in parts):
                    return int(parts[1]), int(parts[0])

        return None


def resolve_width(width: int | None, terminal: TerminalInfoProvider | None = None) -> int:
    """Resolve the line width of a render call.

    Args:
        width: Explicit width or None to ask the terminal
        terminal: Size provider (default: SystemTerminal)

    Returns:
        Positive line width.

    Raises:
        ValidationError: Width is not a positive integer or the terminal
            size is unavailable.
    """
    if width is None:
        size = (terminal or SystemTerminal()).get_size()
        if size is None:
            raise ValidationError("Line width unavailable: terminal size could not be determined")
        width = size.columns

    if not is_valid_width(width):
        raise ValidationError(f"Invalid line width: {width!r}")

    return width


def resolve_size(terminal: TerminalInfoProvider | None = None) -> TerminalSize:
    """Return the terminal size or raise ValidationError if unavailable."""
    size = (terminal or SystemTerminal()).get_size()
    if size is None:
        raise ValidationError("Terminal size could not be determined")
    return size
