from dashboard.core.config import settings
from dashboard.core.logging import logger
from dashboard.crud.users import get_user_by_email, create_user
from dashboard.crud.projects import list_projects, create_project
from dashboard.db.models.user import Role
from dashboard.db.store import JsonStore
from dashboard.schemas.project import ProjectCreate
from dashboard.schemas.users import UserCreateIn
from dashboard.services.assignments import sync_project_users

DEFAULT_ADMIN_ID = "admin-1"


def ensure_default_admin(store: JsonStore) -> None:
    if not settings.DEFAULT_ADMIN_EMAIL or not settings.DEFAULT_ADMIN_PASSWORD:
        return
    if get_user_by_email(store, settings.DEFAULT_ADMIN_EMAIL):
        return
    create_user(store, UserCreateIn(
        name="Administrator",
        email=settings.DEFAULT_ADMIN_EMAIL,
        password=settings.DEFAULT_ADMIN_PASSWORD,
        role=Role.admin,
        department="Administration",
    ), user_id=DEFAULT_ADMIN_ID)
    logger.info("default_admin_created", email=settings.DEFAULT_ADMIN_EMAIL)


def seed_demo(store: JsonStore) -> None:
    # Create default project if none
    if list_projects(store):
        return
    admin = get_user_by_email(store, settings.DEFAULT_ADMIN_EMAIL)
    p = create_project(store, ProjectCreate(
        name="Demo Project",
        description="Seeded demo project",
        client="Demo Client",
        tech_stack=["Python", "FastAPI"],
        assigned_users=[admin.id] if admin else [],
    ))
    sync_project_users(store, p.id, [], p.assigned_users)
    logger.info("demo_seeded", project_id=p.id)
