"""Text layout modules for termlayout.

Provides property/value tables, bordered strings, headings, value lists
and dialog auto-sizing.
"""

from .border import (
    HEADING_STYLES,
    build_bordered_string,
    build_heading,
    render_bordered_string,
    render_heading,
)
from .columns import compute_column_widths
from .dialog import dialog_autosize
from .lists import format_list, format_list_from_mapping
from .table import render_property_value_table, render_table, render_tokens

__all__ = [
    # Tables
    "render_property_value_table",
    "render_table",
    "render_tokens",
    "compute_column_widths",
    # Borders and headings
    "render_bordered_string",
    "build_bordered_string",
    "render_heading",
    "build_heading",
    "HEADING_STYLES",
    # Lists
    "format_list",
    "format_list_from_mapping",
    # Dialogs
    "dialog_autosize",
]
