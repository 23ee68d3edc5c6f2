"""Mock objects and random generators for code that depends on loom-data models.

Every generator returns a valid instance built through the model builder.
"""

import random
import string
from uuid import uuid4

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


def gen_random_string(length: int = 12) -> str:
    """Return a random alphanumeric string."""
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))  # noqa: S311


def gen_random_uuid() -> str:
    return str(uuid4())


def gen_random_permissions() -> list[Permission]:
    return random.sample(list(Permission), k=random.randint(1, len(Permission)))  # noqa: S311


def gen_random_fqn() -> FullyQualifiedName:
    return (
        FullyQualifiedNameBuilder()
        .set_namespace(gen_random_string())
        .set_name(gen_random_string())
        .build()
    )


def gen_random_principal() -> Principal:
    return (
        PrincipalBuilder()
        .set_type(random.choice(list(PrincipalType)))  # noqa: S311
        .set_id(gen_random_string())
        .build()
    )


def gen_random_role() -> Role:
    return (
        RoleBuilder()
        .set_description(gen_random_string())
        .set_id(gen_random_uuid())
        .set_organization_id(gen_random_uuid())
        .set_principal(gen_random_principal())
        .set_title(gen_random_string())
        .build()
    )


def gen_random_access_check() -> AccessCheck:
    return (
        AccessCheckBuilder()
        .set_acl_key([gen_random_uuid(), gen_random_uuid()])
        .set_permissions(gen_random_permissions())
        .build()
    )


def gen_random_ace() -> Ace:
    return (
        AceBuilder()
        .set_principal(gen_random_principal())
        .set_permissions(gen_random_permissions())
        .build()
    )


def gen_random_acl() -> Acl:
    return (
        AclBuilder()
        .set_acl_key([gen_random_uuid(), gen_random_uuid()])
        .set_aces([gen_random_ace(), gen_random_ace()])
        .build()
    )


def gen_random_acl_data() -> AclData:
    return (
        AclDataBuilder()
        .set_acl(gen_random_acl())
        .set_action(random.choice(list(Action)))  # noqa: S311
        .build()
    )


FQN_MOCK = (
    FullyQualifiedNameBuilder().set_namespace("LOOM").set_name("MyEntity").build()
)

PRINCIPAL_MOCK = (
    PrincipalBuilder()
    .set_type(PrincipalType.ROLE)
    .set_id("MockOrgRolePrincipalId")
    .build()
)

ROLE_MOCK = (
    RoleBuilder()
    .set_description("MockOrgRoleDescription")
    .set_id("66da9306-3d1d-49d7-a8ee-8515c9c28434")
    .set_organization_id("a77a0f9a-0e6f-4a98-a169-4d1e122b39a3")
    .set_principal(PRINCIPAL_MOCK)
    .set_title("MockOrgRoleTitle")
    .build()
)

ACCESS_CHECK_MOCK = (
    AccessCheckBuilder()
    .set_acl_key(
        ["a77a0f9a-0e6f-4a98-a169-4d1e122b39a3", "66da9306-3d1d-49d7-a8ee-8515c9c28434"]
    )
    .set_permissions([Permission.READ, Permission.WRITE])
    .build()
)

ACE_MOCK = (
    AceBuilder()
    .set_principal(PRINCIPAL_MOCK)
    .set_permissions([Permission.OWNER, Permission.READ])
    .build()
)

ACL_MOCK = (
    AclBuilder()
    .set_acl_key(["a77a0f9a-0e6f-4a98-a169-4d1e122b39a3"])
    .set_aces([ACE_MOCK])
    .build()
)

ACL_DATA_MOCK = AclDataBuilder().set_acl(ACL_MOCK).set_action(Action.ADD).build()
