"""Property/value table rendering.

Renders aligned, word-wrapped property/value pairs:

                   a    =    A
                   b    =    BBB

                 ccc    =    multiline
                             string

Special properties:
    "" (empty):         pair is skipped
    " " (only spaces):  one blank row is printed instead
"""

from typing import Iterable, Sequence

import config
from enums import Alignment, LengthMode
from errors import ValidationError
from layout.columns import compute_column_widths
from models import ColumnWidths, LayoutRequest, RenderedBlock
from terminal import TerminalInfoProvider, resolve_width
from utils import (
    is_single_char,
    is_valid_padding,
    pad_left,
    pad_right,
    split_lines,
    squeeze_spaces,
    wrap_text,
)

# Content alignment → (property flush right?, value flush right?)
_FLUSH_RIGHT: dict[Alignment, tuple[bool, bool]] = {
    Alignment.LEFT: (False, False),
    Alignment.CENTER: (True, False),
    Alignment.RIGHT: (True, True),
}


def render_property_value_table(
    pairs: Iterable[tuple[str, str]],
    body_align: Alignment | str = Alignment.LEFT,
    content_align: Alignment | str = Alignment.LEFT,
    padding: int = config.DEFAULT_PADDING,
    width: int | None = None,
    separator: str = config.DEFAULT_SEPARATOR,
    terminal: TerminalInfoProvider | None = None,
    length_mode: LengthMode = LengthMode.BYTES,
) -> list[str]:
    """Render property/value pairs as an aligned table.

    Args:
        pairs: (property, value) pairs, in output order
        body_align: Block position relative to the line
        content_align: Justification within each column
        padding: Spaces on each side of the separator (>= 1)
        width: Line width (None: terminal width)
        separator: Single separator character
        terminal: Size provider used when width is None
        length_mode: Length measurement

    Returns:
        Rendered rows, each exactly width long.

    Raises:
        ValidationError: Malformed arguments.
        InsufficientWidthError: Width too small for two columns.
    """
    request = LayoutRequest(
        body_align=Alignment.parse(body_align),
        content_align=Alignment.parse(content_align),
        padding=padding,
        width=width,
        separator=separator,
        pairs=tuple(pairs),
    )
    return render_table(request, terminal=terminal, length_mode=length_mode).lines


def render_table(
    request: LayoutRequest,
    terminal: TerminalInfoProvider | None = None,
    length_mode: LengthMode = LengthMode.BYTES,
) -> RenderedBlock:
    """Render a LayoutRequest.

    Process:
        1. Validate the request (no output on failure)
        2. Resolve the line width
        3. Compute column widths
        4. Wrap and justify every pair

    Returns:
        RenderedBlock with rows, width and column widths.
    """
    validate_request(request)
    width = resolve_width(request.width, terminal)

    columns = compute_column_widths(
        request.pairs,
        request.body_align,
        request.content_align,
        request.padding,
        width,
        length_mode,
    )

    lines: list[str] = []
    for prop, value in request.pairs:
        lines.extend(_render_pair(prop, value, columns, request, width, length_mode))

    return RenderedBlock(lines=lines, width=width, kind="table", columns=columns)


def validate_request(request: LayoutRequest) -> None:
    """Check a request before any computation.

    Raises:
        ValidationError: First problem found.
    """
    if not isinstance(request.body_align, Alignment):
        raise ValidationError(f"Invalid body alignment: {request.body_align!r}")
    if not isinstance(request.content_align, Alignment):
        raise ValidationError(f"Invalid content alignment: {request.content_align!r}")
    if not is_valid_padding(request.padding, minimum=1):
        raise ValidationError(f"Padding must be an integer >= 1, got {request.padding!r}")
    if not is_single_char(request.separator):
        raise ValidationError(
            f"Separator must be exactly one character, got {request.separator!r}"
        )
    for pair in request.pairs:
        if len(pair) != 2 or not all(isinstance(item, str) for item in pair):
            raise ValidationError(f"Invalid property/value pair: {pair!r}")


def render_tokens(
    tokens: Sequence[str],
    body_align: Alignment | str = Alignment.LEFT,
    content_align: Alignment | str = Alignment.LEFT,
    padding: int = config.DEFAULT_PADDING,
    width: int | None = None,
    separator: str = config.DEFAULT_SEPARATOR,
    terminal: TerminalInfoProvider | None = None,
    length_mode: LengthMode = LengthMode.BYTES,
) -> RenderedBlock:
    """Render a flat "property value property value ..." token list.

    Raises:
        ValidationError: Odd number of tokens or malformed arguments.
    """
    request = LayoutRequest.from_tokens(
        tokens,
        body_align=Alignment.parse(body_align),
        content_align=Alignment.parse(content_align),
        padding=padding,
        width=width,
        separator=separator,
    )
    return render_table(request, terminal=terminal, length_mode=length_mode)


def _render_pair(
    prop: str,
    value: str,
    columns: ColumnWidths,
    request: LayoutRequest,
    width: int,
    mode: LengthMode,
) -> list[str]:
    if not split_lines(prop):
        return []

    if squeeze_spaces(prop.rstrip("\n")) == " ":
        return [" " * width]

    prop_lines = wrap_text(prop, columns.property_width, mode)
    value_lines = wrap_text(value, columns.value_width, mode)
    prop_right, value_right = _FLUSH_RIGHT[request.content_align]
    gap = " " * request.padding

    rows = []
    for index in range(max(len(prop_lines), len(value_lines))):
        has_prop = index < len(prop_lines)
        line_prop = prop_lines[index] if has_prop else ""
        line_value = value_lines[index] if index < len(value_lines) else ""
        separator = request.separator if has_prop else " "

        rows.append(
            " " * columns.buffer_left
            + _justify(line_prop, columns.property_width, prop_right, mode)
            + gap
            + separator
            + gap
            + _justify(line_value, columns.value_width, value_right, mode)
            + " " * columns.buffer_right
        )

    return rows


def _justify(text: str, width: int, flush_right: bool, mode: LengthMode) -> str:
    if flush_right:
        return pad_left(text, width, mode)
    return pad_right(text, width, mode)
