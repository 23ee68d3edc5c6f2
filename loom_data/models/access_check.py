"""AccessCheck."""

import logging
from collections.abc import Mapping
from typing import Any

from loom_data.core.pydantic import AclKey
from loom_data.models._builder_registry import BUILDER_REGISTRY
from loom_data.models._common import PermissionSet
from loom_data.models.base_object import BaseObject
from loom_data.models.builder import ModelBuilder
from loom_data.models.validation import is_valid_model
from pydantic import Field

logger = logging.getLogger(__name__)


class AccessCheck(BaseObject):
    """Ask whether the current user holds permissions on a securable object.

    Permissions behave as a set: duplicates collapse and order is irrelevant.

    Examples:
        >>> check = AccessCheck(
        ...     acl_key=["66da9306-3d1d-49d7-a8ee-8515c9c28434"],
        ...     permissions=["READ", "WRITE", "READ"],
        ... )
        >>> check.to_object()["permissions"]
        ['READ', 'WRITE']
    """

    acl_key: AclKey = Field(default=(), description="The securable object ACL key.")
    permissions: PermissionSet = Field(
        default=frozenset(), description="The permissions to check."
    )


@BUILDER_REGISTRY.register
class AccessCheckBuilder(ModelBuilder[AccessCheck]):
    """Build a validated AccessCheck, empty fields default to empty collections."""

    model = AccessCheck


def is_valid_access_check(value: Any) -> bool:
    """Tell whether a value describes an AccessCheck.

    A mapping must carry both the ACL key and the permissions, even though the
    builder would default them.
    """
    if isinstance(value, Mapping):
        for name, field in AccessCheck.model_fields.items():
            if name not in value and (field.alias or name) not in value:
                logger.error(
                    "missing properties: AccessCheck is missing required property %s",
                    field.alias or name,
                )
                return False
    return is_valid_model(value, AccessCheck)
