"""Role."""

from typing import Any, ClassVar
from uuid import UUID

from loom_data.core.pydantic import AclKey, NonEmptyStr, OptionalStr, OptionalUUID
from loom_data.models._builder_registry import BUILDER_REGISTRY
from loom_data.models.base_object import BaseObject
from loom_data.models.builder import ModelBuilder
from loom_data.models.principal import Principal
from loom_data.models.validation import is_valid_model
from pydantic import Field, computed_field

ROLE_CLASS_PACKAGE = "com.openlattice.organization.roles.Role"


class Role(BaseObject):
    """Represent a role defined inside an organization.

    The ACL key of a role is derived from its organization and its own id, it is
    only known once the role has an id.

    Examples:
        >>> role = Role(
        ...     organization_id="a77a0f9a-0e6f-4a98-a169-4d1e122b39a3",
        ...     principal=Principal(type="ROLE", id="MockOrgRolePrincipalId"),
        ...     title="MockOrgRoleTitle",
        ... )
        >>> role.acl_key is None
        True
    """

    class_package: ClassVar[str | None] = ROLE_CLASS_PACKAGE

    id: OptionalUUID = Field(default=None, description="The role id.")
    organization_id: UUID = Field(description="The owning organization id.")
    principal: Principal = Field(description="The principal backing the role.")
    title: NonEmptyStr = Field(description="The role title.")
    description: OptionalStr = Field(default=None, description="The role description.")

    @computed_field(alias="aclKey")  # type: ignore[prop-decorator]
    @property
    def acl_key(self) -> AclKey | None:
        """`[organization_id, id]`, or None while the role has no id."""
        if self.id is None:
            return None
        return (self.organization_id, self.id)


@BUILDER_REGISTRY.register
class RoleBuilder(ModelBuilder[Role]):
    """Build a validated Role."""

    model = Role


def is_valid_role(value: Any) -> bool:
    """Tell whether a value describes a Role."""
    return is_valid_model(value, Role)
