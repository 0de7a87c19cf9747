import pytest

from dashboard.core.permissions import Capabilities, capabilities_for, is_staff
from dashboard.db.models.user import Role

ALL = set(Capabilities.model_fields)


def _granted(caps: Capabilities) -> set[str]:
    return {name for name, value in caps.model_dump().items() if value}

def test_admin_has_everything():
    assert _granted(capabilities_for(Role.admin)) == ALL

def test_manager_only_views_stats():
    assert _granted(capabilities_for(Role.manager)) == {"view_stats"}

@pytest.mark.parametrize("role", [Role.developer, Role.designer, "developer", "designer"])
def test_contributors_have_nothing(role):
    assert _granted(capabilities_for(role)) == set()

@pytest.mark.parametrize("role", ["root", "", None, "Admin"])
def test_unknown_role_has_nothing(role):
    assert _granted(capabilities_for(role)) == set()

def test_plain_strings_match_enum():
    assert capabilities_for("admin") == capabilities_for(Role.admin)

def test_result_is_a_copy():
    caps = capabilities_for(Role.manager)
    caps.delete_users = True
    assert capabilities_for(Role.manager).delete_users is False

def test_camel_case_names_on_the_wire():
    dumped = capabilities_for(Role.admin).model_dump(by_alias=True)
    assert dumped["createProjects"] is True
    assert dumped["assignUsers"] is True

def test_is_staff():
    assert is_staff("admin") and is_staff(Role.manager)
    assert not is_staff("developer") and not is_staff("designer")
