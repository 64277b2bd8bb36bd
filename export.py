"""JSON export functionality.

Exports a rendered block (table, border, heading, ...) to JSON format
with metadata, so other tools can consume the layout without parsing
terminal output.
"""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

import config
from models import RenderedBlock


def export_to_json(block: RenderedBlock, indent: int = 2) -> str:
    """Export to JSON format with metadata.

    Args:
        block: Rendered lines and layout metadata
        indent: JSON indentation (default 2)

    Returns:
        JSON string with metadata and rendered lines.
    """
    output = {
        "metadata": _block_metadata(block),
        "lines": block.lines,
    }

    return json.dumps(output, indent=indent)


def _block_metadata(block: RenderedBlock) -> dict[str, Any]:
    """Build the metadata section for a rendered block.

    Args:
        block: RenderedBlock to describe

    Returns:
        Dictionary suitable for JSON serialization.
    """
    metadata: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "tool": config.TOOL_NAME,
        "version": config.VERSION,
        "kind": block.kind,
        "width": block.width,
        "line_count": len(block.lines),
    }

    # Column widths only exist for tables
    if block.columns is not None:
        metadata["columns"] = asdict(block.columns)

    return metadata
