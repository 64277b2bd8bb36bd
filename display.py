"""Output sink for rendered lines.

Layout functions return lists of lines; this module is the only place
that writes them to a stream. Colors are applied here, after layout, so
they never take part in width accounting.
"""

import sys
from typing import Iterable, TextIO

from colors import colorize


def emit(
    lines: Iterable[str],
    file: TextIO | None = None,
    color: str | None = None,
) -> None:
    """Print lines to specified file or stdout.

    Args:
        lines: Rendered lines (without newlines)
        file: Optional file handle (default: sys.stdout)
        color: Optional ANSI color applied to every non-empty line
    """
    if file is None:
        file = sys.stdout

    for line in lines:
        print(colorize(line, color), file=file)
