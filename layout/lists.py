"""Value list formatting.

    format_list(["VAL1", "VAL2", "VAL3"])  → "{ VAL1 | VAL2 | VAL3 }"
"""

from typing import Iterable, Mapping

import config
from errors import ValidationError


def format_list(
    values: Iterable[str],
    separator: str = config.LIST_SEPARATOR,
    bracket_values: bool = False,
    brace_list: bool = True,
) -> str:
    """Join values into a one-line list.

    Args:
        values: Values in output order
        separator: String between values
        bracket_values: Surround each value with "[" "]"
        brace_list: Surround the whole list with "{ " " }"

    Returns:
        Formatted list.

    Raises:
        ValidationError: No values given.
    """
    values = list(values)
    if not values:
        raise ValidationError("List must contain at least one value")

    if bracket_values:
        values = [f"[{value}]" for value in values]

    joined = separator.join(values)
    if brace_list:
        return f"{{ {joined} }}"
    return joined


def format_list_from_mapping(
    names: Iterable[str],
    mapping: Mapping[str, str],
    prefix: str = "",
    separator: str = config.LIST_SEPARATOR,
    bracket_values: bool = False,
    brace_list: bool = True,
) -> str:
    """Format the values that names point to.

    Each name is looked up as prefix + name; names without an entry are
    skipped.

    Example:
        format_list_from_mapping(
            ["VAL1", "VAL2"], {"PAR_VAL1": "1", "PAR_VAL2": "2"}, prefix="PAR_"
        )  → "{ 1 | 2 }"

    Raises:
        ValidationError: No names given.
    """
    names = list(names)
    if not names:
        raise ValidationError("List must contain at least one name")

    values = [mapping[prefix + name] for name in names if prefix + name in mapping]
    if not values:
        return "{  }" if brace_list else ""

    return format_list(values, separator, bracket_values, brace_list)
