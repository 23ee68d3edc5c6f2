"""Offer enums for loom-data models."""

from enum import StrEnum


class Permission(StrEnum):
    """Permissions a principal can hold on a securable object."""

    DISCOVER = "DISCOVER"
    LINK = "LINK"
    MATERIALIZE = "MATERIALIZE"
    READ = "READ"
    WRITE = "WRITE"
    OWNER = "OWNER"


class PrincipalType(StrEnum):
    """Kinds of principals."""

    ORGANIZATION = "ORGANIZATION"
    ROLE = "ROLE"
    USER = "USER"


class Action(StrEnum):
    """Operations applied to an access control list."""

    ADD = "ADD"
    REMOVE = "REMOVE"
    SET = "SET"
    REQUEST = "REQUEST"


__all__ = [
    "Action",
    "Permission",
    "PrincipalType",
]
