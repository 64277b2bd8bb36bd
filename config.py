"""Configuration constants for termlayout.

All configurable values stored here for easy customization.
Single source of truth for all constants and configuration.
"""

from enum import IntEnum

# Property/Value Table
# Minimum width (in characters) reserved for either table column.
# A line must hold two of these plus the padding and the separator.
WIDTH_MIN: int = 15
DEFAULT_PADDING: int = 2
DEFAULT_SEPARATOR: str = ":"

# Bordered Strings
DEFAULT_BORDER_CHAR: str = "-"
DEFAULT_BORDER_PADDING: int = 1

# Messages
# Tables appended to terminal messages are narrower than the terminal so
# that they still fit inside the surrounding heading border.
MESSAGE_TABLE_MARGIN: int = 12
MESSAGE_TABLE_PADDING: int = 2
MESSAGE_TABLE_SEPARATOR: str = ":"

# Value Lists
LIST_SEPARATOR: str = " | "

# Terminal
# Reported terminal widths are reduced by this many columns, as some
# terminals (e.g. when piping to a pager) report one column too many.
TERMINAL_COLUMN_MARGIN: int = 1
DUMB_TERMINAL: str = "dumb"
TIMEOUT_SECONDS: int = 5

# Dialog Auto-Sizing
DIALOG_MIN_COLUMNS: int = 100
DIALOG_MIN_LINES: int = 30
DIALOG_MARGIN_COLUMNS: int = 2
DIALOG_MARGIN_LINES: int = 10
DIALOG_MIN_WIDTH: int = 80
DIALOG_MIN_HEIGHT: int = 20
DIALOG_ASPECT_RATIO: int = 4


# Exit Codes (Professional: Use IntEnum)
class ExitCode(IntEnum):
    """Standard exit codes for the termlayout tool.

    Using IntEnum provides:
    - Type safety
    - IDE autocomplete
    - Prevents magic numbers
    - Standard Python pattern for exit codes
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INSUFFICIENT_WIDTH = 2
    UNKNOWN_STYLE = 3
    INVALID_ARGUMENTS = 4


# Tool Metadata
VERSION: str = "1.0.0"
TOOL_NAME: str = "termlayout"
