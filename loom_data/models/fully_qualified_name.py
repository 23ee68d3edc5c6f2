"""FullyQualifiedName."""

import logging
from typing import Any

from loom_data.core.pydantic import NonEmptyStr
from loom_data.exceptions import InvalidParameterError, ModelError
from loom_data.models._builder_registry import BUILDER_REGISTRY
from loom_data.models.base_object import BaseObject
from loom_data.models.builder import ModelBuilder
from loom_data.models.validation import is_valid_model
from pydantic import Field

logger = logging.getLogger(__name__)

FQN_SEPARATOR = "."


class FullyQualifiedName(BaseObject):
    """Represent a `namespace.name` pair naming schemas and types.

    Examples:
        >>> fqn = FullyQualifiedName(namespace="LOOM", name="MyEntity")
        >>> str(fqn)
        'LOOM.MyEntity'
        >>> FullyQualifiedName.parse("LOOM.MyEntity") == fqn
        True
    """

    namespace: NonEmptyStr = Field(description="The part before the dot.")
    name: NonEmptyStr = Field(description="The part after the dot.")

    def __str__(self) -> str:
        return f"{self.namespace}{FQN_SEPARATOR}{self.name}"

    @classmethod
    def parse(cls, value: str) -> "FullyQualifiedName":
        """Build a FullyQualifiedName from its `namespace.name` string form.

        Raises:
            InvalidParameterError: `value` is not a string made of exactly two
                non-empty parts separated by a single dot.
        """
        if not isinstance(value, str):
            raise InvalidParameterError("fqn", "must be a string")
        parts = value.split(FQN_SEPARATOR)
        if len(parts) != 2:
            raise InvalidParameterError(
                "fqn", f"must be formatted as 'namespace.name', got '{value}'"
            )
        namespace, name = parts
        builder = FullyQualifiedNameBuilder()
        return builder.set_namespace(namespace).set_name(name).build()


@BUILDER_REGISTRY.register
class FullyQualifiedNameBuilder(ModelBuilder[FullyQualifiedName]):
    """Build a validated FullyQualifiedName."""

    model = FullyQualifiedName


def cast_fqn(value: Any) -> FullyQualifiedName:
    """Coerce an instance, a mapping or a `namespace.name` string to a FullyQualifiedName."""
    if isinstance(value, FullyQualifiedName):
        return value
    if isinstance(value, str):
        return FullyQualifiedName.parse(value)
    return FullyQualifiedNameBuilder(value).build()


def is_valid_fqn(value: Any) -> bool:
    """Tell whether a value describes a FullyQualifiedName, string form included."""
    if isinstance(value, str):
        try:
            FullyQualifiedName.parse(value)
        except ModelError as err:
            logger.error("FullyQualifiedName is not valid: %s", err)
            return False
        return True
    return is_valid_model(value, FullyQualifiedName)
