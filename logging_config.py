"""Logging configuration for termlayout.

Provides colored console output, optional file logging and optional
system log (syslog) delivery.
Uses % formatting (PEP 391) for security.
"""

import logging
import logging.handlers
from pathlib import Path

SYSLOG_ADDRESS: str = "/dev/log"
SYSLOG_IDENT: str = "termlayout: "


class ColoredFormatter(logging.Formatter):
    """Add ANSI colors to log levels."""

    COLORS = {
        "DEBUG": "\033[96m",  # Cyan
        "INFO": "\033[92m",  # Green
        "WARNING": "\033[93m",  # Yellow
        "ERROR": "\033[91m",  # Red
        "CRITICAL": "\033[95m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with color codes.
        """
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    use_colors: bool = True,
    syslog: bool = False,
) -> None:
    """Configure logging.

    Args:
        verbose: Enable DEBUG level (default: WARNING+ only)
        log_file: Optional file output path
        use_colors: Color the console level names
        syslog: Also deliver INFO+ records to the system log
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose or syslog else logging.WARNING)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if use_colors:
        console_handler.setFormatter(ColoredFormatter("%(levelname)s: %(message)s"))
    else:
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    # Syslog handler
    if syslog:
        try:
            syslog_handler = logging.handlers.SysLogHandler(address=SYSLOG_ADDRESS)
        except OSError as e:
            logging.getLogger(__name__).warning("Syslog unavailable: %s", e)
        else:
            syslog_handler.ident = SYSLOG_IDENT
            syslog_handler.setLevel(logging.INFO)
            syslog_handler.setFormatter(logging.Formatter("%(message)s"))
            root_logger.addHandler(syslog_handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance for the module.
    """
    return logging.getLogger(name)
