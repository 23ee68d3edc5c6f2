"""Acl."""

from typing import Any

from loom_data.core.pydantic import NonEmptyAclKey
from loom_data.models._builder_registry import BUILDER_REGISTRY
from loom_data.models.ace import Ace
from loom_data.models.base_object import BaseObject
from loom_data.models.builder import ModelBuilder
from loom_data.models.validation import is_valid_model
from pydantic import Field


class Acl(BaseObject):
    """Represent the access control list of a securable object."""

    acl_key: NonEmptyAclKey = Field(description="The securable object ACL key.")
    aces: tuple[Ace, ...] = Field(description="The access control entries.")


@BUILDER_REGISTRY.register
class AclBuilder(ModelBuilder[Acl]):
    """Build a validated Acl."""

    model = Acl


def is_valid_acl(value: Any) -> bool:
    """Tell whether a value describes an Acl."""
    return is_valid_model(value, Acl)
