from dashboard.db.models.user import User, Role, UserStatus
from dashboard.db.models.project import Project, ProjectStatus, Environment, Comment
