"""Exception hierarchy for termlayout.

Layout functions raise these and never log them.
Reporting is the caller's responsibility (see termlayout.main).
"""


class LayoutError(Exception):
    """Base class for all termlayout errors."""


class ValidationError(LayoutError):
    """Raised when a render request is malformed."""


class InsufficientWidthError(ValidationError):
    """Raised when the line width cannot hold the requested layout.

    Attributes:
        minimum: Smallest line width that would have worked
    """

    def __init__(self, minimum: int, message: str | None = None) -> None:
        self.minimum = minimum
        super().__init__(
            message
            or f"Terminal's (or individually set) width is too small, minimum is <{minimum}>."
        )


class UnknownStyleError(ValidationError):
    """Raised when a heading style is not in the style table."""

    def __init__(self, style: str) -> None:
        self.style = style
        super().__init__(f"Unknown heading style: {style!r}")


class TerminalTooSmallError(LayoutError):
    """Raised when the terminal window is below a required size."""

    def __init__(self, minimum_columns: int, minimum_lines: int) -> None:
        self.minimum_columns = minimum_columns
        self.minimum_lines = minimum_lines
        super().__init__(
            f"Terminal window is too small, minimum size is <{minimum_columns}x{minimum_lines}>."
        )
