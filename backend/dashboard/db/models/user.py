from enum import Enum

from dashboard.db.models._mixins import TimestampMixin

class Role(str, Enum):
    admin = "admin"
    manager = "manager"
    developer = "developer"
    designer = "designer"

class UserStatus(str, Enum):
    active = "active"
    inactive = "inactive"

class User(TimestampMixin):
    id: str
    name: str
    email: str
    password: str | None = None  # argon2 hash
    role: Role = Role.developer
    department: str = ""
    status: UserStatus = UserStatus.active
    avatar: str | None = None
    join_date: str | None = None
    last_login: str | None = None
    projects_count: int = 0
    assigned_projects: list[str] = []
