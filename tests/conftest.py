# pragma: no cover  # do not test coverage of tests...
# type: ignore
"""Provide fixtures for pytest."""

import logging

import pytest
from loom_data.models import Permission, Principal, PrincipalType, Role

ORGANIZATION_ID = "a77a0f9a-0e6f-4a98-a169-4d1e122b39a3"
ROLE_ID = "66da9306-3d1d-49d7-a8ee-8515c9c28434"


@pytest.fixture
def fake_valid_principal() -> Principal:
    """Fixture to create a fake valid Principal."""
    return Principal(type=PrincipalType.ROLE, id="MockOrgRolePrincipalId")


@pytest.fixture
def fake_valid_role_data() -> dict:
    """Fixture to create the wire form of a fake valid Role."""
    return {
        "id": ROLE_ID,
        "organizationId": ORGANIZATION_ID,
        "principal": {"type": "ROLE", "id": "MockOrgRolePrincipalId"},
        "title": "MockOrgRoleTitle",
        "description": "MockOrgRoleDescription",
    }


@pytest.fixture
def fake_valid_role(fake_valid_principal) -> Role:
    """Fixture to create a fake valid Role."""
    return Role(
        id=ROLE_ID,
        organization_id=ORGANIZATION_ID,
        principal=fake_valid_principal,
        title="MockOrgRoleTitle",
        description="MockOrgRoleDescription",
    )


@pytest.fixture
def fake_valid_permissions() -> list[Permission]:
    """Fixture to create a fake valid permission list, duplicates included."""
    return [Permission.WRITE, Permission.READ, Permission.WRITE]


@pytest.fixture
def error_logs(caplog):
    """Capture error logs emitted under the loom_data logger."""
    caplog.set_level(logging.ERROR, logger="loom_data")
    return caplog
