"""Ace."""

from typing import Any

from loom_data.models._builder_registry import BUILDER_REGISTRY
from loom_data.models._common import PermissionSet
from loom_data.models.base_object import BaseObject
from loom_data.models.builder import ModelBuilder
from loom_data.models.principal import Principal
from loom_data.models.validation import is_valid_model
from pydantic import Field


class Ace(BaseObject):
    """Represent an access control entry: permissions granted to one principal."""

    principal: Principal = Field(description="The principal the entry applies to.")
    permissions: PermissionSet = Field(description="The granted permissions.")


@BUILDER_REGISTRY.register
class AceBuilder(ModelBuilder[Ace]):
    """Build a validated Ace."""

    model = Ace


def is_valid_ace(value: Any) -> bool:
    """Tell whether a value describes an Ace."""
    return is_valid_model(value, Ace)
