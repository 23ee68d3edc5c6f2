"""Common parsers for pydantic models."""

from collections.abc import Set
from typing import Any


def is_blank(value: Any) -> bool:
    """Tell whether a value stands for "not provided".

    `None`, the empty string and empty collections are blank. Anything else,
    including `0` and `False`, is not.

    Examples:
    - None -> True
    - "" -> True
    - [] -> True
    - "LOOM" -> False
    """
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, Set)):
        return len(value) == 0
    return False


def empty_to_none(value: Any) -> Any:
    """Coerce an empty string into `None`, leave any other value unchanged.

    Used as a `BeforeValidator` on optional fields so that `""` coming from the
    wire is treated as an absent value rather than as an invalid one.
    """
    if isinstance(value, str) and value == "":
        return None
    return value
