"""Type-safe enumerations for termlayout.

All categorical values use enum types for type safety and consistency.
Command-line style tokens (e.g. "--left", "-c") are parsed here so that
the layout code only ever sees enum members.
"""

from enum import Enum

from errors import UnknownStyleError, ValidationError


def _strip_dashes(token: str) -> str:
    return token.strip().lstrip("-").lower()


class Alignment(str, Enum):
    """Body or content alignment of a property/value table."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def parse(cls, token: "str | Alignment") -> "Alignment":
        """Parse "left", "-l" or "--left" style tokens.

        Raises:
            ValidationError: Token is not a known alignment.
        """
        if isinstance(token, cls):
            return token

        name = _strip_dashes(str(token))
        for member in cls:
            if name in (member.value, member.value[0]):
                return member

        raise ValidationError(f"Invalid alignment: {token!r}")


class HeadingStyle(str, Enum):
    """Named heading presets.

    The digits of the numbered variants encode the heading level, the
    number of blank lines before and the number of blank lines after.
    """

    HEADING1 = "heading1"
    HEADING100 = "heading100"
    HEADING101 = "heading101"
    HEADING110 = "heading110"
    HEADING111 = "heading111"
    HEADING120 = "heading120"
    HEADING2 = "heading2"
    HEADING200 = "heading200"
    HEADING201 = "heading201"
    HEADING210 = "heading210"
    HEADING211 = "heading211"
    HEADING3 = "heading3"
    HEADING300 = "heading300"
    HEADING301 = "heading301"
    HEADING310 = "heading310"
    HEADING311 = "heading311"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def parse(cls, token: "str | HeadingStyle") -> "HeadingStyle":
        """Parse "heading1", "--heading1", "-1", "--warn", "-e" style tokens.

        Raises:
            UnknownStyleError: Token does not name a heading style.
        """
        if isinstance(token, cls):
            return token

        name = _strip_dashes(str(token))
        if name.isdigit():
            name = f"heading{name}"
        elif name in ("w", "warn"):
            name = cls.WARNING.value
        elif name == "e":
            name = cls.ERROR.value

        try:
            return cls(name)
        except ValueError:
            raise UnknownStyleError(str(token)) from None


class MessageType(str, Enum):
    """Message severity for terminal/system-log messages."""

    ERROR = "error"
    INFO = "info"
    WARNING = "warning"

    @classmethod
    def parse(cls, token: "str | MessageType") -> "MessageType":
        """Parse "error", "--info" or "--warning" style tokens.

        Raises:
            ValidationError: Token is not a known message type.
        """
        if isinstance(token, cls):
            return token

        name = _strip_dashes(str(token))
        if name == "warn":
            name = cls.WARNING.value
        try:
            return cls(name)
        except ValueError:
            raise ValidationError(f"Invalid message type: {token!r}") from None


class LogDestination(str, Enum):
    """Where a message is delivered.

    AUTO: Terminal if the target stream is a TTY, system log otherwise
    BOTH: Terminal and system log
    SYSLOG: System log only (through the logging module)
    TERMINAL: Terminal only
    """

    AUTO = "auto"
    BOTH = "both"
    SYSLOG = "syslog"
    TERMINAL = "terminal"


class LengthMode(str, Enum):
    """How string lengths are measured for width accounting.

    BYTES: UTF-8 byte length (matches printf/fold on a plain POSIX shell)
    CHARACTERS: Unicode code point length
    """

    BYTES = "bytes"
    CHARACTERS = "characters"
