"""Column name conversion for schema field names."""

from __future__ import annotations

import re

_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_upper_snake(name: str) -> str:
    """Convert a lower-camel-case field name into an upper-snake-case column name.

    Splits before every uppercase letter except a leading one, upper-cases
    each segment, and joins them with underscores. A name without lowercase
    letters is already in column shape and is only upper-cased, so applying
    the conversion twice yields the same result.

    Args:
        name: Field name such as ``"orderId"``.

    Returns:
        str: Column name such as ``"ORDER_ID"``.

    Examples:
        to_upper_snake("orderId")  # "ORDER_ID"
        to_upper_snake("address2Line")  # "ADDRESS2_LINE"
        to_upper_snake("ORDER_ID")  # "ORDER_ID"
    """
    if not any(character.islower() for character in name):
        return name.upper()
    return _WORD_BOUNDARY.sub("_", name).upper()
