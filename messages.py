"""Error/info/warning messages for terminals and the system log.

Terminal messages:
    ERROR   → error heading on stderr
    WARNING → warning heading on stdout
    INFO    → plain text on stdout

System log messages go through the logging module with a "[TYPE] "
prefix; setup_logging(syslog=True) routes them to syslog.
"""

import sys
from typing import Iterable, TextIO

import config
from colors import MESSAGE_COLORS
from config import ExitCode
from display import emit
from enums import Alignment, HeadingStyle, LogDestination, MessageType
from layout.border import render_heading
from layout.table import render_property_value_table
from logging_config import get_logger
from terminal import SystemTerminal, TerminalInfoProvider, resolve_width

logger = get_logger(__name__)

_LOG_PREFIXES: dict[MessageType, str] = {
    MessageType.ERROR: "[ERROR] ",
    MessageType.INFO: "[INFO] ",
    MessageType.WARNING: "[WARNING] ",
}


class Messenger:
    """Deliver messages to the terminal and/or the system log.

    Attributes:
        terminal: Size provider for headings and tables
        stdout: Stream for info/warning messages
        stderr: Stream for error messages
        use_colors: Color terminal messages by type
    """

    def __init__(
        self,
        terminal: TerminalInfoProvider | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        use_colors: bool = False,
    ) -> None:
        self.terminal = terminal or SystemTerminal()
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.use_colors = use_colors

    def message(
        self,
        message_type: MessageType | str,
        text: str,
        syslog_text: str | None = None,
        destination: LogDestination = LogDestination.AUTO,
    ) -> int:
        """Deliver a message.

        Args:
            message_type: ERROR, INFO or WARNING
            text: Terminal version of the message
            syslog_text: System log version (default: text)
            destination: AUTO, BOTH, SYSLOG or TERMINAL

        Returns:
            ExitCode.GENERAL_ERROR for errors, ExitCode.SUCCESS otherwise.
        """
        message_type = MessageType.parse(message_type)
        if syslog_text is None:
            syslog_text = text

        if destination == LogDestination.AUTO:
            destination = self._auto_destination(message_type)

        if destination in (LogDestination.TERMINAL, LogDestination.BOTH):
            self._to_terminal(message_type, text)
        if destination in (LogDestination.SYSLOG, LogDestination.BOTH):
            self._to_log(message_type, syslog_text)

        if message_type == MessageType.ERROR:
            return ExitCode.GENERAL_ERROR
        return ExitCode.SUCCESS

    def echo(
        self,
        message_type: MessageType | str,
        text: str,
        pairs: Iterable[tuple[str, str]] | None = None,
    ) -> int:
        """Print a terminal message, optionally followed by a property/value table.

        The table is centred and config.MESSAGE_TABLE_MARGIN columns
        narrower than the terminal, so it fits inside heading borders.
        """
        pairs = list(pairs or [])
        if pairs:
            width = resolve_width(None, self.terminal) - config.MESSAGE_TABLE_MARGIN
            table = render_property_value_table(
                pairs,
                body_align=Alignment.CENTER,
                content_align=Alignment.CENTER,
                padding=config.MESSAGE_TABLE_PADDING,
                width=width,
                separator=config.MESSAGE_TABLE_SEPARATOR,
            )
            text = text + "\n\n" + "\n".join(table)

        return self.message(message_type, text, destination=LogDestination.TERMINAL)

    def log(self, message_type: MessageType | str, text: str) -> int:
        """Send a message to the system log only."""
        return self.message(message_type, text, destination=LogDestination.SYSLOG)

    def _auto_destination(self, message_type: MessageType) -> LogDestination:
        stream = self.stderr if message_type == MessageType.ERROR else self.stdout
        isatty = getattr(stream, "isatty", None)
        if isatty is not None and isatty():
            return LogDestination.TERMINAL
        return LogDestination.SYSLOG

    def _to_terminal(self, message_type: MessageType, text: str) -> None:
        color = MESSAGE_COLORS[message_type] if self.use_colors else None

        if message_type == MessageType.INFO:
            emit(text.split("\n"), file=self.stdout, color=color)
            return

        style = HeadingStyle.ERROR if message_type == MessageType.ERROR else HeadingStyle.WARNING
        stream = self.stderr if message_type == MessageType.ERROR else self.stdout
        emit(render_heading(style, text, terminal=self.terminal), file=stream, color=color)

    def _to_log(self, message_type: MessageType, text: str) -> None:
        record = _LOG_PREFIXES[message_type] + text
        if message_type == MessageType.ERROR:
            logger.error("%s", record)
        elif message_type == MessageType.WARNING:
            logger.warning("%s", record)
        else:
            logger.info("%s", record)
