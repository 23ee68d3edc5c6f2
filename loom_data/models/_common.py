"""Offer common constants and types for loom-data models."""

from typing import Annotated

from loom_data.core.pydantic import sorted_values_serializer
from loom_data.models.enums import Permission
from pydantic import PlainSerializer

AT_CLASS = "@class"

PermissionSet = Annotated[
    frozenset[Permission],  # Final type
    PlainSerializer(sorted_values_serializer, return_type=list[str], when_used="json"),
]
PermissionSet.__doc__ = """
Annotated frozenset[Permission] that:
- Validates: Accepts any iterable of Permission members or their string values,
  duplicates are collapsed.
- Serializes (JSON): A sorted list of permission values, e.g. ["READ", "WRITE"].
"""
