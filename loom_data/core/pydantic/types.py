"""Commonly used Pydantic types with custom validation and serialization logic."""

from typing import Annotated
from uuid import UUID

from loom_data.core.pydantic.parsers import empty_to_none
from pydantic import BeforeValidator, Field, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strict=True, min_length=1)]
NonEmptyStr.__doc__ = """A str with at least one character. Other types are not coerced."""

OptionalStr = Annotated[NonEmptyStr | None, BeforeValidator(empty_to_none)]
OptionalStr.__doc__ = """Optional non-empty str, `""` is read as `None`."""

OptionalUUID = Annotated[UUID | None, BeforeValidator(empty_to_none)]
OptionalUUID.__doc__ = """Optional UUID, `""` is read as `None`."""

AclKey = tuple[UUID, ...]
NonEmptyAclKey = Annotated[AclKey, Field(min_length=1)]
