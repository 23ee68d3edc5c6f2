"""Offer pydantic types, parsers and serializers shared by the models."""

from loom_data.core.pydantic.parsers import empty_to_none, is_blank
from loom_data.core.pydantic.serializers import sorted_values_serializer
from loom_data.core.pydantic.types import (
    AclKey,
    NonEmptyAclKey,
    NonEmptyStr,
    OptionalStr,
    OptionalUUID,
)

__all__ = [
    "AclKey",
    "NonEmptyAclKey",
    "NonEmptyStr",
    "OptionalStr",
    "OptionalUUID",
    "empty_to_none",
    "is_blank",
    "sorted_values_serializer",
]
