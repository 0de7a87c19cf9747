from dashboard.db.models._mixins import CamelModel
from dashboard.db.models.user import Role


class Capabilities(CamelModel):
    create_projects: bool = False
    edit_projects: bool = False
    delete_projects: bool = False
    view_users: bool = False
    create_users: bool = False
    edit_users: bool = False
    delete_users: bool = False
    view_stats: bool = False
    assign_users: bool = False


_CAPABILITIES: dict[Role, Capabilities] = {
    Role.admin: Capabilities(**{name: True for name in Capabilities.model_fields}),
    Role.manager: Capabilities(view_stats=True),
    Role.developer: Capabilities(),
    Role.designer: Capabilities(),
}


def capabilities_for(role: Role | str | None) -> Capabilities:
    """Map a role to its capability set. Unknown roles get nothing."""
    try:
        role = Role(role)
    except ValueError:
        return Capabilities()
    return _CAPABILITIES[role].model_copy()


# Roles that see every project and manage other users' records.
STAFF_ROLES = (Role.admin, Role.manager)


def is_staff(role: Role | str) -> bool:
    return role in {r.value for r in STAFF_ROLES}
