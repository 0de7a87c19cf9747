from pydantic import Field

from dashboard.db.models._mixins import CamelModel
from dashboard.db.models.user import Role, UserStatus

class UserCreateIn(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, max_length=256)
    password: str = Field(..., min_length=1, max_length=128)
    role: Role
    department: str = Field(..., min_length=1)
    status: UserStatus = UserStatus.active
    assigned_projects: list[str] = []

class UserUpdateIn(CamelModel):
    name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, min_length=3, max_length=256)
    password: str | None = Field(default=None, max_length=128)
    role: Role | None = None
    department: str | None = None
    status: UserStatus | None = None
    avatar: str | None = None
    assigned_projects: list[str] | None = None

    def to_patch(self) -> dict:
        """Fields present in the request; ``null`` means "leave as is"."""
        patch = self.model_dump(exclude_unset=True, exclude_none=True)
        if not patch.get("password"):
            patch.pop("password", None)
        return patch

class UserOut(CamelModel):
    id: str
    name: str
    email: str
    role: Role
    department: str
    status: UserStatus
    avatar: str | None = None
    join_date: str | None = None
    last_login: str | None = None
    projects_count: int = 0
    assigned_projects: list[str] = []
    created_at: str | None = None
    updated_at: str | None = None

class UserResponse(CamelModel):
    message: str | None = None
    user: UserOut

class UsersResponse(CamelModel):
    users: list[UserOut]
