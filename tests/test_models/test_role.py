"""Offer tests for the Role model."""

from uuid import UUID

import pytest
from loom_data.models import ROLE_CLASS_PACKAGE, Role, RoleBuilder, is_valid_role
from loom_data.models.base_object import BaseObject
from pydantic import ValidationError

ORGANIZATION_ID = "a77a0f9a-0e6f-4a98-a169-4d1e122b39a3"
ROLE_ID = "66da9306-3d1d-49d7-a8ee-8515c9c28434"


def test_role_should_be_a_base_object():
    """Test that Role is a BaseObject."""
    assert issubclass(Role, BaseObject)


def test_role_should_derive_acl_key_from_organization_and_id(fake_valid_role):
    """Test that the ACL key is [organizationId, id]."""
    # Given a role with an id
    # Then its acl key should be derived
    assert fake_valid_role.acl_key == (UUID(ORGANIZATION_ID), UUID(ROLE_ID))


def test_role_without_id_should_have_no_acl_key(fake_valid_principal):
    """Test that a role without id has no ACL key."""
    # Given a role built without id
    role = (
        RoleBuilder()
        .set_organization_id(ORGANIZATION_ID)
        .set_principal(fake_valid_principal)
        .set_title("title")
        .build()
    )
    # Then it has neither id nor acl key, and its wire form omits both
    assert role.id is None
    assert role.acl_key is None
    assert "aclKey" not in role.to_object()
    assert "id" not in role.to_object()


def test_role_to_object_should_match_wire_format(fake_valid_role):
    """Test that to_object returns the platform's wire format."""
    # Given a complete role
    # When converting it to its wire form
    obj = fake_valid_role.to_object()
    # Then it should carry every property in camelCase
    assert obj == {
        "@class": ROLE_CLASS_PACKAGE,
        "aclKey": [ORGANIZATION_ID, ROLE_ID],
        "description": "MockOrgRoleDescription",
        "id": ROLE_ID,
        "organizationId": ORGANIZATION_ID,
        "principal": {"id": "MockOrgRolePrincipalId", "type": "ROLE"},
        "title": "MockOrgRoleTitle",
    }


def test_role_should_parse_its_wire_form(fake_valid_role):
    """Test that from_object accepts the output of to_object."""
    assert Role.from_object(fake_valid_role.to_object()) == fake_valid_role


def test_role_should_read_empty_optional_strings_as_unset(fake_valid_role_data):
    """Test that empty description and id are treated as absent."""
    # Given a wire form with empty optional values
    fake_valid_role_data.update(description="", id="")
    # When parsing it
    role = Role.from_object(fake_valid_role_data)
    # Then the optional values should be unset
    assert role.description is None
    assert role.id is None


@pytest.mark.parametrize(
    "update",
    [
        pytest.param({"organizationId": "invalid"}, id="invalid organizationId"),
        pytest.param({"title": ""}, id="empty title"),
        pytest.param({"principal": {"type": "ROLE"}}, id="incomplete principal"),
        pytest.param({"unexpected": "value"}, id="extra property"),
    ],
)
def test_role_should_not_allow_invalid_wire_form(fake_valid_role_data, update):
    """Test that direct parsing raises ValidationError."""
    fake_valid_role_data.update(update)
    with pytest.raises(ValidationError):
        Role.from_object(fake_valid_role_data)


def test_role_should_be_immutable(fake_valid_role):
    """Test that a Role cannot be modified once built."""
    with pytest.raises(ValidationError):
        fake_valid_role.title = "Other"


def test_roles_with_same_values_should_be_equal(fake_valid_role, fake_valid_role_data):
    """Test the value semantics of Role."""
    other = RoleBuilder(fake_valid_role_data).build()
    assert other == fake_valid_role
    assert hash(other) == hash(fake_valid_role)
    assert other != RoleBuilder(fake_valid_role_data).set_title("Other").build()


def test_is_valid_role(fake_valid_role, fake_valid_role_data, error_logs):
    """Test the Role validation predicate."""
    # Given valid and invalid values
    # Then the predicate should tell them apart without raising
    assert is_valid_role(fake_valid_role)
    assert is_valid_role(fake_valid_role_data)
    assert not is_valid_role(None)
    assert not is_valid_role({"title": "title"})
    assert not is_valid_role({**fake_valid_role_data, "organizationId": "invalid"})
    # and errors should be logged
    assert len(error_logs.records) == 3
