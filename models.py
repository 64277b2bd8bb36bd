"""Data models for layout requests and results.

All models use dataclasses for immutability and type safety.

Architecture:
- LayoutRequest: One property/value table render call
- ColumnWidths: Derived column and buffer widths of a table
- HeadingSpec: Border/padding preset behind a heading style
- TerminalSize: Terminal window dimensions
- DialogSize: Computed dialog box dimensions
- RenderedBlock: Rendered lines plus the metadata used to produce them
"""

from dataclasses import dataclass
from typing import Sequence

import config
from enums import Alignment
from errors import ValidationError
from utils.validators import has_even_count


@dataclass(frozen=True)
class LayoutRequest:
    """Arguments of one property/value table render call.

    Constructed per call, never persisted.
    """

    body_align: Alignment = Alignment.LEFT
    content_align: Alignment = Alignment.LEFT
    padding: int = config.DEFAULT_PADDING
    width: int | None = None  # None: query the terminal
    separator: str = config.DEFAULT_SEPARATOR
    pairs: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_tokens(
        cls,
        tokens: Sequence[str],
        body_align: Alignment = Alignment.LEFT,
        content_align: Alignment = Alignment.LEFT,
        padding: int = config.DEFAULT_PADDING,
        width: int | None = None,
        separator: str = config.DEFAULT_SEPARATOR,
    ) -> "LayoutRequest":
        """Build a request from a flat "property value property value ..." list.

        Args:
            tokens: Alternating property/value strings
            body_align: Block position relative to the line
            content_align: Justification within each column
            padding: Spaces on each side of the separator
            width: Line width (None: terminal width)
            separator: Single separator character

        Returns:
            LayoutRequest with tokens grouped into pairs.

        Raises:
            ValidationError: Odd number of tokens.
        """
        if not has_even_count(tokens):
            raise ValidationError(
                f"Property/value tokens must come in pairs, got {len(tokens)}"
            )

        pairs = tuple(
            (tokens[index], tokens[index + 1]) for index in range(0, len(tokens), 2)
        )
        return cls(
            body_align=body_align,
            content_align=content_align,
            padding=padding,
            width=width,
            separator=separator,
            pairs=pairs,
        )


@dataclass(frozen=True)
class ColumnWidths:
    """Column and blank-buffer widths of a rendered table.

    A row is laid out as:
        buffer_left | property | padding | separator | padding | value | buffer_right
    """

    property_width: int
    value_width: int
    buffer_left: int = 0
    buffer_right: int = 0

    def line_width(self, padding: int) -> int:
        """Total width of one row for the given separator padding."""
        return (
            self.buffer_left
            + self.property_width
            + 2 * padding
            + 1
            + self.value_width
            + self.buffer_right
        )


@dataclass(frozen=True)
class HeadingSpec:
    """Preset behind a heading style."""

    border_char: str
    padding: int  # Spaces between border and text
    framed: bool  # Border-only line above and below the text
    padding_top: int  # Blank lines before the heading
    padding_bottom: int  # Blank lines after the heading
    prefix: str = ""  # Prepended to the heading text


@dataclass(frozen=True)
class TerminalSize:
    """Terminal window dimensions."""

    columns: int
    lines: int


@dataclass(frozen=True)
class DialogSize:
    """Dialog box dimensions in lines and columns."""

    height: int
    width: int

    def __str__(self) -> str:
        return f"{self.height} {self.width}"


@dataclass
class RenderedBlock:
    """Output of a render call.

    Keeps the resolved line width and, for tables, the column widths
    so the display and export layers do not need to recompute them.
    """

    lines: list[str]
    width: int
    kind: str  # "table", "border", "heading", ...
    columns: ColumnWidths | None = None
