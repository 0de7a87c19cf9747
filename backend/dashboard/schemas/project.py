from typing import Any

from pydantic import Field

from dashboard.db.models._mixins import CamelModel
from dashboard.db.models.project import Environment, Project, ProjectStatus

class ProjectCreate(CamelModel):
    name: str = ""
    description: str = ""
    client: str = ""
    status: ProjectStatus = ProjectStatus.active
    environments: list[Environment] = []
    tech_stack: list[str] = []
    docs_url: str | None = None
    gitlab_url: str | None = None
    assigned_users: list[str] = []


class ProjectUpdate(CamelModel):
    name: str | None = None
    description: str | None = None
    client: str | None = None
    status: ProjectStatus | None = None
    environments: list[Environment] | None = None
    tech_stack: list[str] | None = None
    docs_url: str | None = None
    gitlab_url: str | None = None
    assigned_users: list[str] | None = None

    def to_patch(self) -> dict:
        # docsUrl/gitlabUrl may be cleared with an explicit null
        patch = self.model_dump(exclude_unset=True)
        return {k: v for k, v in patch.items() if v is not None or k in ("docs_url", "gitlab_url")}


class AssignUsersIn(CamelModel):
    user_ids: Any = None


class CommentIn(CamelModel):
    text: str = Field(..., min_length=1, max_length=5000)


class ProjectResponse(CamelModel):
    message: str | None = None
    project: Project

class ProjectsResponse(CamelModel):
    projects: list[Project]
