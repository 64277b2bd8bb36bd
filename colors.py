"""ANSI color codes for terminal output.

Provides the color palette and active color configuration.
All colors optimized for dark terminal backgrounds.
"""

from enum import StrEnum

from enums import MessageType


# Color Palette as StrEnum
class AllColors(StrEnum):
    """ANSI codes available to the Color enum below."""

    # Bright Colors (Best for dark backgrounds)
    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_CYAN = "\033[96m"

    # Special
    RESET = "\033[0m"


# Active Colors (Used for Messages)
# CUSTOMIZE HERE: Change these to any color from AllColors above
class Color(StrEnum):
    """Active colors used for message output.

    To change colors: Replace the value with any from AllColors above.
    Example: WARNING = AllColors.BRIGHT_CYAN  # Use cyan for warnings
    """

    ERROR = AllColors.BRIGHT_RED
    WARNING = AllColors.BRIGHT_YELLOW
    INFO = AllColors.BRIGHT_GREEN
    HEADING = AllColors.BRIGHT_CYAN
    RESET = AllColors.RESET  # Reset (don't change)


MESSAGE_COLORS: dict[MessageType, Color] = {
    MessageType.ERROR: Color.ERROR,
    MessageType.WARNING: Color.WARNING,
    MessageType.INFO: Color.INFO,
}


def colorize(text: str, color: str | None) -> str:
    """Wrap text in a color code and a reset (no-op for empty text or color)."""
    if not color or not text:
        return text
    return f"{color}{text}{Color.RESET}"
