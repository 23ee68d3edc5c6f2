"""Generic validated builder for loom-data models.

A model's pydantic field table is the single source of truth for its builder:
the annotation and `Field(...)` metadata give the validator, a missing default
makes the field required, and the default itself is applied on `build()`.

Examples:
    >>> role = (
    ...     Role.builder()
    ...     .set_organization_id("a77a0f9a-0e6f-4a98-a169-4d1e122b39a3")
    ...     .set_principal({"type": "ROLE", "id": "MockOrgRolePrincipalId"})
    ...     .set_title("MockOrgRoleTitle")
    ...     .build()
    ... )
"""

import logging
from collections.abc import Callable, Mapping
from functools import cache, partial
from typing import Any, ClassVar, Generic, Self, TypeVar, cast

from loom_data.core.pydantic import is_blank
from loom_data.exceptions import InvalidParameterError, MissingPropertyError
from loom_data.models.base_object import BaseObject
from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseObject)

SETTER_PREFIX = "set_"


@cache
def _field_adapter(model: type[BaseObject], name: str) -> TypeAdapter[Any]:
    return TypeAdapter(model.model_fields[name].rebuild_annotation())


def _wire_name(model: type[BaseObject], name: str) -> str:
    return model.model_fields[name].alias or name


def _reason(error: ValidationError) -> str:
    first = error.errors(include_url=False)[0]
    loc = ".".join(str(part) for part in first["loc"])
    return f"{first['msg']} (at {loc})" if loc else str(first["msg"])


class ModelBuilder(Generic[T]):
    """Accumulate validated field values, then produce an immutable model.

    Subclasses only declare the `model` they build. Every model field gets a
    chainable `set_<field>` setter; `set(field, value)` accepts either the
    snake_case field name or the camelCase wire name.

    Notes:
        - Optional fields ignore `None`, `""` and empty collections, keeping any
          previously set value.
        - Required fields validate every value, so `None` is rejected.
    """

    model: ClassVar[type[BaseObject]]

    def __init__(self, value: Any = None) -> None:
        """Seed the builder from a model instance or a mapping of field values.

        Raises:
            TypeError: `value` is neither a mapping nor an instance of the model.
            InvalidParameterError: A present field fails validation.
        """
        self._values: dict[str, Any] = {}
        if value is None:
            return
        if isinstance(value, self.model):
            value = {name: getattr(value, name) for name in self.model.model_fields}
        if not isinstance(value, Mapping):
            raise TypeError(
                f"{type(self).__name__} expects a mapping or a "
                f"{self.model.__name__}, got {type(value).__name__}."
            )
        for name in self.model.model_fields:
            wire_name = _wire_name(self.model, name)
            if wire_name in value:
                self.set(name, value[wire_name])
            elif name in value:
                self.set(name, value[name])

    def __getattr__(self, name: str) -> Callable[[Any], Self]:
        if name.startswith(SETTER_PREFIX):
            field = name[len(SETTER_PREFIX) :]
            if field in self.model.model_fields:
                return partial(self.set, field)
        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute '{name}'"
        )

    @classmethod
    def _resolve(cls, field: str) -> str:
        fields = cls.model.model_fields
        if field in fields:
            return field
        for name in fields:
            if _wire_name(cls.model, name) == field:
                return name
        raise InvalidParameterError(field, f"is not a field of {cls.model.__name__}")

    def set(self, field: str, value: Any) -> Self:
        """Validate and store one field value.

        Raises:
            InvalidParameterError: Unknown field, or the value fails the field validator.
        """
        name = self._resolve(field)
        if not self.model.model_fields[name].is_required() and is_blank(value):
            return self
        try:
            self._values[name] = _field_adapter(self.model, name).validate_python(
                value
            )
        except ValidationError as err:
            raise InvalidParameterError(
                _wire_name(self.model, name), _reason(err)
            ) from err
        return self

    def build(self) -> T:
        """Check required fields and construct the model.

        Raises:
            MissingPropertyError: A required field was never set.
            InvalidParameterError: The model-level validation failed.
        """
        for name, field in self.model.model_fields.items():
            if field.is_required() and name not in self._values:
                raise MissingPropertyError(_wire_name(self.model, name))
        try:
            instance = self.model(**self._values)
        except ValidationError as err:
            first = err.errors(include_url=False)[0]
            field = str(first["loc"][0]) if first["loc"] else self.model.__name__
            raise InvalidParameterError(field, str(first["msg"])) from err
        logger.debug("Built %s", self.model.__name__)
        return cast(T, instance)
