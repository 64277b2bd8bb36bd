"""Utilities package for termlayout.

Provides text measurement and wrapping, input validation and system
command execution.
"""

from .system import command_exists, run_command, sanitize_for_log
from .text import (
    display_length,
    fold,
    is_multiline,
    pad_left,
    pad_right,
    remove_trailing_spaces,
    split_lines,
    squeeze_spaces,
    wrap_text,
)
from .validators import (
    has_even_count,
    is_integer,
    is_single_char,
    is_valid_padding,
    is_valid_width,
)

__all__ = [
    # System
    "run_command",
    "command_exists",
    "sanitize_for_log",
    # Text
    "display_length",
    "split_lines",
    "is_multiline",
    "remove_trailing_spaces",
    "squeeze_spaces",
    "fold",
    "wrap_text",
    "pad_left",
    "pad_right",
    # Validators
    "is_integer",
    "is_valid_padding",
    "is_valid_width",
    "is_single_char",
    "has_even_count",
]
