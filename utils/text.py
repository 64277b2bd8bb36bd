"""Text primitives for width accounting and wrapping.

All layout code measures strings through display_length() so that a
single LengthMode decides how wide a string is. The default is the UTF-8
byte length, which is what printf/fold count on a plain POSIX shell.

Wrapping follows "fold -s": greedy, breaks after the last blank that
still fits, hard-breaks tokens that are wider than the line.
"""

import re

from enums import LengthMode

BLANKS: str = " \t"


def display_length(text: str, mode: LengthMode = LengthMode.BYTES) -> int:
    """Measure a string for width accounting.

    Args:
        text: String to measure
        mode: BYTES (UTF-8 byte length) or CHARACTERS (code points)

    Returns:
        Length used for all column/border calculations.
    """
    if mode == LengthMode.CHARACTERS:
        return len(text)
    return len(text.encode("utf-8"))


def split_lines(text: str) -> list[str]:
    """Split text on embedded newlines.

    Trailing newlines are dropped, empty lines inside the text are kept.

    Examples:
        "a\\nb"    → ["a", "b"]
        "a\\n\\nb" → ["a", "", "b"]
        "a\\n"     → ["a"]
        ""        → []
    """
    stripped = text.rstrip("\n")
    if not stripped:
        return []
    return stripped.split("\n")


def is_multiline(text: str) -> bool:
    """Check whether text contains a line break."""
    return "\n" in text


def remove_trailing_spaces(text: str) -> str:
    """Strip trailing space characters (other whitespace is kept)."""
    return text.rstrip(" ")


def squeeze_spaces(text: str) -> str:
    """Collapse runs of spaces into a single space ("tr -s ' '")."""
    return re.sub(r" {2,}", " ", text)


def fold(line: str, width: int, mode: LengthMode = LengthMode.BYTES) -> list[str]:
    """Greedily break a single line into pieces of at most width.

    Process:
        1. Append characters while they fit
        2. On overflow, break after the last blank in the piece
        3. Without a blank, break right before the overflowing character
        4. A single character wider than width still gets its own piece

    Blanks at a break stay at the end of the piece (strip them with
    remove_trailing_spaces()). An empty line yields one empty piece.

    Args:
        line: Text without newlines
        width: Maximum piece length (>= 1)
        mode: Length measurement

    Returns:
        List of pieces in order; joining them reproduces the line.
    """
    pieces: list[str] = []
    piece = ""

    for char in line:
        while piece and display_length(piece + char, mode) > width:
            cut = max(piece.rfind(blank) for blank in BLANKS)
            if cut >= 0:
                pieces.append(piece[: cut + 1])
                piece = piece[cut + 1 :]
            else:
                pieces.append(piece)
                piece = ""
        piece += char

    pieces.append(piece)
    return pieces


def wrap_text(text: str, width: int, mode: LengthMode = LengthMode.BYTES) -> list[str]:
    """Split text into physical lines of at most width.

    Embedded newlines are respected, each line is folded separately and
    trailing spaces are removed from every resulting line.

    Args:
        text: Possibly multi-line text
        width: Maximum line length (>= 1)
        mode: Length measurement

    Returns:
        Physical lines (empty list for empty text).
    """
    lines: list[str] = []
    for line in split_lines(text):
        lines.extend(remove_trailing_spaces(piece) for piece in fold(line, width, mode))
    return lines


def pad_right(text: str, width: int, mode: LengthMode = LengthMode.BYTES) -> str:
    """Left-justify text in a field of width (like printf "%-Ns")."""
    return text + " " * max(width - display_length(text, mode), 0)


def pad_left(text: str, width: int, mode: LengthMode = LengthMode.BYTES) -> str:
    """Right-justify text in a field of width (like printf "%Ns")."""
    return " " * max(width - display_length(text, mode), 0) + text
