"""Column width computation for property/value tables.

Three disjoint algorithms, selected by body alignment:

    LEFT:   property column sized by the longest property line,
            value column takes the rest of the line
    RIGHT:  value column sized by the longest value line,
            property column takes the rest of the line
    CENTER: both columns grow against ceilings that shrink as the other
            column grows, then the separator is shifted away from the
            middle of the line towards the wider column

Every result satisfies ColumnWidths.line_width(padding) == width.
"""

from typing import Sequence

import config
from enums import Alignment, LengthMode
from errors import InsufficientWidthError
from logging_config import get_logger
from models import ColumnWidths
from utils import display_length, fold, remove_trailing_spaces, split_lines

logger = get_logger(__name__)

Pair = tuple[str, str]


def max_column_width(width: int, padding: int) -> int:
    """Widest a column may get while the other keeps config.WIDTH_MIN.

    Line width - 2x padding - separator - minimum width of the other column.
    """
    return width - 2 * padding - 1 - config.WIDTH_MIN


def check_width(width: int, padding: int) -> int:
    """Ensure that width can hold two minimum-width columns.

    Returns:
        Maximum column width (see max_column_width()).

    Raises:
        InsufficientWidthError: Width too small; carries the minimum.
    """
    width_max = max_column_width(width, padding)
    if width_max < config.WIDTH_MIN:
        raise InsufficientWidthError(minimum=width + (config.WIDTH_MIN - width_max))
    return width_max


def compute_column_widths(
    pairs: Sequence[Pair],
    body_align: Alignment,
    content_align: Alignment,
    padding: int,
    width: int,
    mode: LengthMode = LengthMode.BYTES,
) -> ColumnWidths:
    """Compute column and buffer widths for a table.

    Args:
        pairs: (property, value) pairs
        body_align: Block position relative to the line
        content_align: Justification within each column
        padding: Spaces on each side of the separator (>= 1)
        width: Line width
        mode: Length measurement

    Returns:
        ColumnWidths filling exactly width.

    Raises:
        InsufficientWidthError: Width cannot hold the layout.
    """
    width_max = check_width(width, padding)

    if body_align == Alignment.LEFT:
        columns = _left_widths(pairs, padding, width, width_max, mode)
    elif body_align == Alignment.RIGHT:
        columns = _right_widths(pairs, padding, width, width_max, mode)
    else:
        columns = _center_widths(pairs, content_align, padding, width, width_max, mode)

    logger.debug(
        "Column widths (%s/%s, width %d): property=%d value=%d buffer=%d/%d",
        body_align.value,
        content_align.value,
        width,
        columns.property_width,
        columns.value_width,
        columns.buffer_left,
        columns.buffer_right,
    )
    return columns


def _longest_line(texts: Sequence[str], width_max: int, mode: LengthMode) -> int:
    """Length of the longest embedded line, capped at width_max."""
    longest = 0
    for text in texts:
        for line in split_lines(text):
            length = display_length(line, mode)
            if length >= width_max:
                return width_max
            longest = max(longest, length)
    return longest


def _left_widths(
    pairs: Sequence[Pair], padding: int, width: int, width_max: int, mode: LengthMode
) -> ColumnWidths:
    property_width = _longest_line([prop for prop, _ in pairs], width_max, mode)
    property_width = max(property_width, config.WIDTH_MIN)
    value_width = width - property_width - 2 * padding - 1
    return ColumnWidths(property_width=property_width, value_width=value_width)


def _right_widths(
    pairs: Sequence[Pair], padding: int, width: int, width_max: int, mode: LengthMode
) -> ColumnWidths:
    value_width = _longest_line([value for _, value in pairs], width_max, mode)
    value_width = max(value_width, config.WIDTH_MIN)
    property_width = width - value_width - 2 * padding - 1
    return ColumnWidths(property_width=property_width, value_width=value_width)


def _grow(text: str, current: int, ceiling: int, mode: LengthMode) -> int:
    """Grow a column width to fit text without passing ceiling.

    Lines at or above the ceiling are folded at the ceiling and their
    longest piece counts instead.
    """
    for line in split_lines(text):
        length = display_length(line, mode)
        if length <= current:
            continue
        if length < ceiling:
            current = length
            continue
        for piece in fold(line, ceiling, mode):
            current = max(current, display_length(remove_trailing_spaces(piece), mode))
            if current >= ceiling:
                return ceiling
    return current


def _truncdiv(numerator: int, denominator: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _sign(number: int) -> int:
    return (number > 0) - (number < 0)


def center_shift(property_width: int, value_width: int, width: int) -> int:
    """Shift of the separator away from the middle of the line.

        shift = trunc(diff / 2) + sign(diff) * (width % 2) * rem(diff, 2)

    with diff = property_width - value_width. rem() carries the sign of
    diff, so on odd line widths an odd difference always adds +1.

    Examples:
        (5, 2, 40) → 1
        (5, 2, 41) → 2
        (2, 5, 41) → 0
    """
    diff = property_width - value_width
    remainder = diff - 2 * _truncdiv(diff, 2)
    return _truncdiv(diff, 2) + _sign(diff) * (width % 2) * remainder


def _center_widths(
    pairs: Sequence[Pair],
    content_align: Alignment,
    padding: int,
    width: int,
    width_max: int,
    mode: LengthMode,
) -> ColumnWidths:
    span = width - 2 * padding - 1  # Both columns together
    property_width = 0
    value_width = 0
    property_width_max = width_max
    value_width_max = width_max

    for prop, value in pairs:
        if property_width < property_width_max:
            grown = _grow(prop, property_width, property_width_max, mode)
            if grown > property_width:
                property_width = grown
                value_width_max = min(span - property_width, width_max)
        if value_width < value_width_max:
            grown = _grow(value, value_width, value_width_max, mode)
            if grown > value_width:
                value_width = grown
                property_width_max = min(span - value_width, width_max)

    # "Natural" widths, as if there were no content at all
    value_central = width // 2 - padding
    property_central = value_central - (1 - width % 2)

    shift = center_shift(property_width, value_width, width)
    buffer_left = 0
    buffer_right = 0

    if property_width > property_central:
        # Property wider than its half: separator moves right
        shift -= property_width - property_central
        if content_align == Alignment.LEFT:
            buffer_left = value_width_max - value_width - abs(shift)
            value_width += abs(shift)
        elif content_align == Alignment.CENTER:
            property_width += shift
            value_width = value_width_max - shift
        else:
            property_width += shift
            buffer_right = abs(shift)

    elif value_width > value_central:
        # Value wider than its half: separator moves left
        shift += value_width - value_central
        if content_align == Alignment.LEFT:
            buffer_left = property_width_max - property_width - abs(shift)
            value_width += abs(shift)
        elif content_align == Alignment.CENTER:
            property_width = property_width_max + shift
            value_width -= shift
        else:
            property_width = property_width_max + shift
            buffer_right = abs(shift)

    else:
        # Both columns fit into their halves
        property_width = property_central + shift
        value_width = value_central - shift

    return _settle(property_width, buffer_left, buffer_right, span)


def _settle(
    property_width: int,
    buffer_left: int,
    buffer_right: int,
    span: int,
) -> ColumnWidths:
    """Make a row fill the line exactly.

    Negative buffers are dropped and the value column takes whatever is
    left of the line. When that leaves the value column empty, the
    missing room is taken from the right buffer, then the left buffer.
    The property column is capped at span - 1, so the buffers always
    cover the deficit.
    """
    buffer_left = max(buffer_left, 0)
    buffer_right = max(buffer_right, 0)
    property_width = min(max(property_width, 1), span - 1)
    value_width = span - property_width - buffer_left - buffer_right

    if value_width < 1:
        deficit = 1 - value_width
        taken = min(deficit, buffer_right)
        buffer_right -= taken
        buffer_left -= deficit - taken
        value_width = 1

    return ColumnWidths(
        property_width=property_width,
        value_width=value_width,
        buffer_left=buffer_left,
        buffer_right=buffer_right,
    )
