"""Bordered strings and headings.

    ----- Some text -----

A bordered string is centred between two runs of border characters.
When the text and the line width do not split evenly, the right border
gets the extra character.
"""

import config
from enums import HeadingStyle, LengthMode
from errors import InsufficientWidthError, ValidationError
from models import HeadingSpec, RenderedBlock
from terminal import TerminalInfoProvider, resolve_width
from utils import (
    display_length,
    fold,
    is_multiline,
    is_single_char,
    is_valid_padding,
    remove_trailing_spaces,
)

HEADING_STYLES: dict[HeadingStyle, HeadingSpec] = {
    HeadingStyle.HEADING1: HeadingSpec("=", 5, True, 2, 1),
    HeadingStyle.HEADING100: HeadingSpec("=", 5, True, 0, 0),
    HeadingStyle.HEADING101: HeadingSpec("=", 5, True, 0, 1),
    HeadingStyle.HEADING110: HeadingSpec("=", 5, True, 1, 0),
    HeadingStyle.HEADING111: HeadingSpec("=", 5, True, 1, 1),
    HeadingStyle.HEADING120: HeadingSpec("=", 5, True, 2, 0),
    HeadingStyle.HEADING2: HeadingSpec("-", 5, True, 1, 0),
    HeadingStyle.HEADING200: HeadingSpec("-", 5, True, 0, 0),
    HeadingStyle.HEADING201: HeadingSpec("-", 5, True, 0, 1),
    HeadingStyle.HEADING210: HeadingSpec("-", 5, True, 1, 0),
    HeadingStyle.HEADING211: HeadingSpec("-", 5, True, 1, 1),
    HeadingStyle.HEADING3: HeadingSpec("_", 1, False, 1, 0),
    HeadingStyle.HEADING300: HeadingSpec("_", 1, False, 0, 0),
    HeadingStyle.HEADING301: HeadingSpec("_", 1, False, 0, 1),
    HeadingStyle.HEADING310: HeadingSpec("_", 1, False, 1, 0),
    HeadingStyle.HEADING311: HeadingSpec("_", 1, False, 1, 1),
    HeadingStyle.WARNING: HeadingSpec("^", 1, True, 1, 1, prefix="[WARNING] "),
    HeadingStyle.ERROR: HeadingSpec("!", 1, True, 1, 1, prefix="[ERROR] "),
}


def render_bordered_string(
    text: str = "",
    border_char: str = config.DEFAULT_BORDER_CHAR,
    padding: int | None = None,
    width: int | None = None,
    terminal: TerminalInfoProvider | None = None,
    length_mode: LengthMode = LengthMode.BYTES,
) -> list[str]:
    """Surround text with border characters.

    Multi-line text and text too long for one line produce one bordered
    line per (wrapped) line. Empty text produces a border-only line.

    Args:
        text: Text to frame (may be empty or multi-line)
        border_char: Single border character
        padding: Spaces between border and text
            (default: config.DEFAULT_BORDER_PADDING, forced to 0 for empty text)
        width: Line width (None: terminal width)
        terminal: Size provider used when width is None
        length_mode: Length measurement

    Returns:
        Bordered lines, each exactly width long.

    Raises:
        ValidationError: Bad border character or padding.
        InsufficientWidthError: Width below 2 borders + 2x padding (+1 for text).
    """
    return build_bordered_string(
        text, border_char, padding, width, terminal, length_mode
    ).lines


def _bordered(
    text: str, border_char: str, padding: int | None, width: int, mode: LengthMode
) -> list[str]:
    if is_multiline(text):
        lines = []
        for line in text.rstrip("\n").split("\n"):
            lines.extend(_bordered(line, border_char, padding, width, mode))
        return lines

    text_length = display_length(text, mode)

    # No padding around empty text
    if text_length == 0:
        padding = 0
        content = 0
    else:
        padding = config.DEFAULT_BORDER_PADDING if padding is None else padding
        content = 1

    if not is_single_char(border_char):
        raise ValidationError(
            f"Border must be exactly one character, got {border_char!r}"
        )
    if not is_valid_padding(padding, minimum=0):
        raise ValidationError(f"Padding must be an integer >= 0, got {padding!r}")

    # 2 border chars (l+r) + 2x padding (l+r) + 1 char of text
    minimum = 2 + 2 * padding + content
    if width < minimum:
        raise InsufficientWidthError(minimum=minimum)

    text_length_max = width - 2 * padding - 2
    if text_length > text_length_max:
        pieces = fold(text, text_length_max, mode)
        # A single character wider than the room left cannot be broken
        if pieces == [text]:
            raise InsufficientWidthError(minimum=2 + 2 * padding + text_length)
        lines = []
        for piece in pieces:
            lines.extend(
                _bordered(remove_trailing_spaces(piece), border_char, padding, width, mode)
            )
        return lines

    border = border_char * ((width - (text_length + 2 * padding)) // 2)
    spaces = " " * padding

    if (text_length + width) % 2 == 0:
        return [f"{border}{spaces}{text}{spaces}{border}"]
    return [f"{border}{spaces}{text}{spaces}{border}{border_char}"]


def render_heading(
    style: HeadingStyle | str,
    text: str,
    width: int | None = None,
    terminal: TerminalInfoProvider | None = None,
    length_mode: LengthMode = LengthMode.BYTES,
) -> list[str]:
    """Format text as a heading.

    Output:
        padding_top empty lines
        border-only line (framed styles)
        bordered text
        border-only line (framed styles)
        padding_bottom empty lines

    Args:
        style: HeadingStyle or token ("heading1", "--heading1", "-1", "--warn", "-e")
        text: Heading text
        width: Line width (None: terminal width)
        terminal: Size provider used when width is None
        length_mode: Length measurement

    Returns:
        Heading lines.

    Raises:
        UnknownStyleError: Style not in HEADING_STYLES.
    """
    return build_heading(style, text, width, terminal, length_mode).lines


def build_heading(
    style: HeadingStyle | str,
    text: str,
    width: int | None = None,
    terminal: TerminalInfoProvider | None = None,
    length_mode: LengthMode = LengthMode.BYTES,
) -> RenderedBlock:
    """Like render_heading(), returning a RenderedBlock."""
    spec = HEADING_STYLES[HeadingStyle.parse(style)]
    width = resolve_width(width, terminal)

    lines = [""] * spec.padding_top
    if spec.framed:
        lines.extend(_bordered("", spec.border_char, None, width, length_mode))
    lines.extend(
        _bordered(spec.prefix + text, spec.border_char, spec.padding, width, length_mode)
    )
    if spec.framed:
        lines.extend(_bordered("", spec.border_char, None, width, length_mode))
    lines.extend([""] * spec.padding_bottom)

    return RenderedBlock(lines=lines, width=width, kind="heading")


def build_bordered_string(
    text: str = "",
    border_char: str = config.DEFAULT_BORDER_CHAR,
    padding: int | None = None,
    width: int | None = None,
    terminal: TerminalInfoProvider | None = None,
    length_mode: LengthMode = LengthMode.BYTES,
) -> RenderedBlock:
    """Like render_bordered_string(), returning a RenderedBlock."""
    width = resolve_width(width, terminal)
    return RenderedBlock(
        lines=_bordered(text, border_char, padding, width, length_mode),
        width=width,
        kind="border",
    )
