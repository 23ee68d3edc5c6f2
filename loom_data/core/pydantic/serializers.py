"""Custom Pydantic serializers for loom-data models."""

from collections.abc import Iterable
from enum import Enum
from typing import Any


def sorted_values_serializer(value: Iterable[Any]) -> list[Any]:
    """Serialize an unordered collection as a sorted list.

    Set-valued fields must produce the same JSON regardless of insertion order,
    since equality and hashing of the models are computed from their JSON form.
    Enum members are replaced by their values.

    Examples:
    - frozenset({Permission.WRITE, Permission.READ}) -> ["READ", "WRITE"]
    """
    return sorted(
        item.value if isinstance(item, Enum) else item for item in value
    )
