"""BaseObject."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from loom_data.models._builder_registry import BUILDER_REGISTRY
from loom_data.models._common import AT_CLASS
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from loom_data.models.builder import ModelBuilder


class BaseObject(BaseModel):
    """Represent an immutable value object exchanged with the platform.

    Fields are declared in snake_case and travel over the wire in camelCase.
    Subclasses may set `class_package` to have their wire form carry an
    `@class` discriminator.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    class_package: ClassVar[str | None] = None

    @model_validator(mode="before")
    @classmethod
    def _drop_derived_keys(cls, data: Any) -> Any:
        """Remove the `@class` marker and computed fields from wire input."""
        if not isinstance(data, dict):
            return data
        class_package = data.get(AT_CLASS)
        if class_package is not None and class_package != cls.class_package:
            raise ValueError(
                f"{AT_CLASS} '{class_package}' does not match {cls.__name__}."
            )
        derived = {AT_CLASS}
        for name, computed in cls.model_computed_fields.items():
            derived.update({name, computed.alias or name})
        return {key: value for key, value in data.items() if key not in derived}

    def __hash__(self) -> int:
        """Create a hash based on the model's json representation dynamically."""
        return hash(self.model_dump_json())

    def __eq__(self, other: Any) -> bool:
        """Implement comparison between similar object."""
        if not isinstance(other, self.__class__):
            raise NotImplementedError("Cannot compare objects from different type.")
        return self.model_dump_json() == other.model_dump_json()

    @classmethod
    def builder(cls, value: Any = None) -> ModelBuilder[Any]:
        """Return the registered builder for this model, seeded with `value`."""
        return BUILDER_REGISTRY.get(cls)(value)

    @classmethod
    def from_object(cls, value: dict[str, Any]) -> BaseObject:
        """Parse the wire form of the model.

        Raises:
            pydantic.ValidationError: The mapping does not describe a valid model.
        """
        return cls.model_validate(value)

    def to_object(self) -> dict[str, Any]:
        """Return the wire form: camelCase keys, unset optionals omitted."""
        obj = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if self.class_package is not None:
            obj[AT_CLASS] = self.class_package
        return obj

    def value_of(self) -> int:
        """Return a hash of the wire form, equal for equal objects."""
        return hash(self)
