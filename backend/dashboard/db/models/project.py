from enum import Enum

from dashboard.db.models._mixins import CamelModel, TimestampMixin

class ProjectStatus(str, Enum):
    active = "active"
    maintenance = "maintenance"
    completed = "completed"
    paused = "paused"
    archived = "archived"

class Environment(CamelModel):
    name: str
    url: str

class Comment(CamelModel):
    id: str
    text: str
    author: str
    date: str

class Project(TimestampMixin):
    id: str
    name: str
    description: str
    client: str
    status: ProjectStatus = ProjectStatus.active
    environments: list[Environment] = []
    tech_stack: list[str] = []
    docs_url: str | None = None
    gitlab_url: str | None = None
    comments: list[Comment] = []
    assigned_users: list[str] = []
