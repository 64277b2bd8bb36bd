"""Dialog box auto-sizing.

Computes a height/width for dialog(1)-style boxes that keeps a given
aspect ratio and fits the current terminal.
"""

import config
from errors import TerminalTooSmallError, ValidationError
from logging_config import get_logger
from models import DialogSize
from terminal import TerminalInfoProvider, resolve_size
from utils import is_integer

logger = get_logger(__name__)


def dialog_autosize(
    ratio: int = config.DIALOG_ASPECT_RATIO,
    height: int | None = None,
    width: int | None = None,
    terminal: TerminalInfoProvider | None = None,
) -> DialogSize:
    """Calculate the size of a dialog box.

    Process:
        1. Require a terminal of at least 100x30
        2. Usable area: lines - 10, columns - 2
        3. Fixed width: clamp it, derive the height from the ratio
        4. Otherwise: fixed or maximum height, derive the width

    Args:
        ratio: Aspect ratio width : height (>= 1)
        height: Optional fixed height in lines (>= 20)
        width: Optional fixed width in columns (>= 80)
        terminal: Size provider (default: SystemTerminal)

    Returns:
        DialogSize(height, width).

    Raises:
        TerminalTooSmallError: Terminal below 100x30.
        ValidationError: Bad ratio/height/width or unknown terminal size.
    """
    size = resolve_size(terminal)
    if size.lines < config.DIALOG_MIN_LINES or size.columns < config.DIALOG_MIN_COLUMNS:
        raise TerminalTooSmallError(config.DIALOG_MIN_COLUMNS, config.DIALOG_MIN_LINES)

    lines = size.lines - config.DIALOG_MARGIN_LINES
    columns = size.columns - config.DIALOG_MARGIN_COLUMNS

    if not is_integer(ratio) or ratio < 1:
        raise ValidationError(f"Aspect ratio must be an integer >= 1, got {ratio!r}")
    if height is not None and (not is_integer(height) or height < config.DIALOG_MIN_HEIGHT):
        raise ValidationError(
            f"Height must be an integer >= {config.DIALOG_MIN_HEIGHT}, got {height!r}"
        )
    if width is not None and (not is_integer(width) or width < config.DIALOG_MIN_WIDTH):
        raise ValidationError(
            f"Width must be an integer >= {config.DIALOG_MIN_WIDTH}, got {width!r}"
        )

    if width is not None:
        width = min(width, columns)
        height = width // ratio
        if height > lines:
            height = lines
            width = height * ratio
    else:
        if height is None or height > lines:
            height = lines
        width = height * ratio
        if width > columns:
            width = columns
            height = width // ratio

    logger.debug("Dialog size for %dx%d terminal: %dx%d", size.columns, size.lines, width, height)
    return DialogSize(height=height, width=width)
