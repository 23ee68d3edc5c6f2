"""Principal."""

from typing import Any

from loom_data.core.pydantic import NonEmptyStr
from loom_data.models._builder_registry import BUILDER_REGISTRY
from loom_data.models.base_object import BaseObject
from loom_data.models.builder import ModelBuilder
from loom_data.models.enums import PrincipalType
from loom_data.models.validation import is_valid_model
from pydantic import Field


class Principal(BaseObject):
    """Represent a user, role or organization able to hold permissions.

    Examples:
        >>> principal = Principal(type="USER", id="openlattice|12345")
    """

    type: PrincipalType = Field(description="The kind of principal.")
    id: NonEmptyStr = Field(description="The principal identifier.")


@BUILDER_REGISTRY.register
class PrincipalBuilder(ModelBuilder[Principal]):
    """Build a validated Principal."""

    model = Principal


def is_valid_principal(value: Any) -> bool:
    """Tell whether a value describes a Principal."""
    return is_valid_model(value, Principal)
