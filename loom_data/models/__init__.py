"""Offer models."""

from loom_data.models.access_check import (
    AccessCheck,
    AccessCheckBuilder,
    is_valid_access_check,
)
from loom_data.models.ace import Ace, AceBuilder, is_valid_ace
from loom_data.models.acl import Acl, AclBuilder, is_valid_acl
from loom_data.models.acl_data import AclData, AclDataBuilder, is_valid_acl_data
from loom_data.models.base_object import BaseObject
from loom_data.models.builder import ModelBuilder
from loom_data.models.enums import Action, Permission, PrincipalType
from loom_data.models.fully_qualified_name import (
    FullyQualifiedName,
    FullyQualifiedNameBuilder,
    cast_fqn,
    is_valid_fqn,
)
from loom_data.models.principal import Principal, PrincipalBuilder, is_valid_principal
from loom_data.models.role import ROLE_CLASS_PACKAGE, Role, RoleBuilder, is_valid_role
from loom_data.models.validation import is_valid_model

__all__ = [
    # Typing purpose
    "BaseObject",
    "ModelBuilder",
    # Enums
    "Action",
    "Permission",
    "PrincipalType",
    # Models flat list
    "AccessCheck",
    "Ace",
    "Acl",
    "AclData",
    "FullyQualifiedName",
    "Principal",
    "Role",
    # Builders
    "AccessCheckBuilder",
    "AceBuilder",
    "AclBuilder",
    "AclDataBuilder",
    "FullyQualifiedNameBuilder",
    "PrincipalBuilder",
    "RoleBuilder",
    # Validation
    "cast_fqn",
    "is_valid_access_check",
    "is_valid_ace",
    "is_valid_acl",
    "is_valid_acl_data",
    "is_valid_fqn",
    "is_valid_model",
    "is_valid_principal",
    "is_valid_role",
    # Constants
    "ROLE_CLASS_PACKAGE",
]
