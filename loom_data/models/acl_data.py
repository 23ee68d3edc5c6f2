"""AclData."""

from typing import Any

from loom_data.models._builder_registry import BUILDER_REGISTRY
from loom_data.models.acl import Acl
from loom_data.models.base_object import BaseObject
from loom_data.models.builder import ModelBuilder
from loom_data.models.enums import Action
from loom_data.models.validation import is_valid_model
from pydantic import Field


class AclData(BaseObject):
    """Pair an Acl with the action to apply it with (add, remove, set, request)."""

    acl: Acl = Field(description="The access control list.")
    action: Action = Field(description="How the list is applied.")


@BUILDER_REGISTRY.register
class AclDataBuilder(ModelBuilder[AclData]):
    """Build a validated AclData."""

    model = AclData


def is_valid_acl_data(value: Any) -> bool:
    """Tell whether a value describes an AclData."""
    return is_valid_model(value, AclData)
