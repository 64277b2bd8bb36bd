"""Input validation utilities.

Provides validation for numeric layout arguments and single characters.
All validators return bool; callers decide which error to raise.
"""

from typing import Any, Sized


def is_integer(value: Any) -> bool:
    """Check for a real integer (bool is rejected).

    Args:
        value: Value to check

    Returns:
        True if value is an int but not a bool, False otherwise.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_padding(padding: Any, minimum: int = 1) -> bool:
    """Validate a padding width.

    Args:
        padding: Number of spaces
        minimum: Smallest allowed value (tables: 1, borders: 0)

    Returns:
        True if padding is an integer >= minimum, False otherwise.
    """
    return is_integer(padding) and padding >= minimum


def is_valid_width(width: Any) -> bool:
    """Validate a line width.

    Args:
        width: Number of columns

    Returns:
        True if width is a positive integer, False otherwise.
    """
    return is_integer(width) and width > 0


def is_single_char(value: Any) -> bool:
    """Validate a separator or border character.

    Args:
        value: Candidate character

    Returns:
        True if value is a string of exactly one character, False otherwise.
    """
    return isinstance(value, str) and len(value) == 1


def has_even_count(items: Sized) -> bool:
    """Check that items can be grouped into pairs.

    Args:
        items: Flat property/value token sequence

    Returns:
        True if the number of items is even, False otherwise.
    """
    return len(items) % 2 == 0
