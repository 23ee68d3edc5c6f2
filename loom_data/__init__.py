"""Offer the loom-data value objects and their validated builders."""

__version__ = "0.1.0"

from loom_data.models import (
    AccessCheck,
    AccessCheckBuilder,
    Ace,
    AceBuilder,
    Acl,
    AclBuilder,
    AclData,
    AclDataBuilder,
    Action,
    FullyQualifiedName,
    FullyQualifiedNameBuilder,
    Permission,
    Principal,
    PrincipalBuilder,
    PrincipalType,
    Role,
    RoleBuilder,
)
from loom_data.settings import LoomDataSettings
from loom_data.utils.logger import configure_logging

__all__ = [
    # Settings
    "LoomDataSettings",
    "configure_logging",
    # Models
    "AccessCheck",
    "AccessCheckBuilder",
    "Ace",
    "AceBuilder",
    "Acl",
    "AclBuilder",
    "AclData",
    "AclDataBuilder",
    "Action",
    "FullyQualifiedName",
    "FullyQualifiedNameBuilder",
    "Permission",
    "Principal",
    "PrincipalBuilder",
    "PrincipalType",
    "Role",
    "RoleBuilder",
]
