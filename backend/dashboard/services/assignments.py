"""Keeps ``project.assigned_users`` and ``user.assigned_projects`` mirrored.

Every function here runs after the primary write has been stored. Failures are
logged and swallowed so the caller's mutation still succeeds; the two sides can
therefore drift until the next write touching them.
"""
from dashboard.core.logging import logger
from dashboard.crud import projects as project_crud
from dashboard.crud import users as user_crud
from dashboard.db.models.project import Project
from dashboard.db.models.user import User
from dashboard.db.store import JsonStore


def _diff(previous: list[str], current: list[str]) -> tuple[list[str], list[str]]:
    added = [x for x in current if x not in previous]
    removed = [x for x in previous if x not in current]
    return added, removed


def _link_user(store: JsonStore, user_id: str, project_id: str) -> None:
    u = user_crud.get_user(store, user_id)
    if not u:
        logger.warning("assignment_target_missing", user_id=user_id, project_id=project_id)
        return
    if project_id not in u.assigned_projects:
        user_crud.update_user(store, user_id, {"assigned_projects": u.assigned_projects + [project_id]})

def _unlink_user(store: JsonStore, user_id: str, project_id: str) -> None:
    u = user_crud.get_user(store, user_id)
    if not u:
        logger.warning("assignment_target_missing", user_id=user_id, project_id=project_id)
        return
    if project_id in u.assigned_projects:
        user_crud.update_user(
            store, user_id, {"assigned_projects": [p for p in u.assigned_projects if p != project_id]}
        )

def _link_project(store: JsonStore, project_id: str, user_id: str) -> None:
    p = project_crud.get_project(store, project_id)
    if not p:
        logger.warning("assignment_target_missing", user_id=user_id, project_id=project_id)
        return
    if user_id not in p.assigned_users:
        project_crud.update_project(store, project_id, {"assigned_users": p.assigned_users + [user_id]})

def _unlink_project(store: JsonStore, project_id: str, user_id: str) -> None:
    p = project_crud.get_project(store, project_id)
    if not p:
        logger.warning("assignment_target_missing", user_id=user_id, project_id=project_id)
        return
    if user_id in p.assigned_users:
        project_crud.update_project(
            store, project_id, {"assigned_users": [u for u in p.assigned_users if u != user_id]}
        )


def _best_effort(action, store: JsonStore, target_id: str, other_id: str, op: str) -> None:
    try:
        action(store, target_id, other_id)
    except Exception:
        logger.exception("assignment_sync_failed", op=op, target_id=target_id, other_id=other_id)


def sync_project_users(store: JsonStore, project_id: str, previous: list[str], current: list[str]) -> None:
    """Mirror a change of a project's user list onto the affected users."""
    added, removed = _diff(previous, current)
    for user_id in added:
        _best_effort(_link_user, store, user_id, project_id, "link_user")
    for user_id in removed:
        _best_effort(_unlink_user, store, user_id, project_id, "unlink_user")

def sync_user_projects(store: JsonStore, user_id: str, previous: list[str], current: list[str]) -> None:
    """Mirror a change of a user's project list onto the affected projects."""
    added, removed = _diff(previous, current)
    for project_id in added:
        _best_effort(_link_project, store, project_id, user_id, "link_project")
    for project_id in removed:
        _best_effort(_unlink_project, store, project_id, user_id, "unlink_project")


def detach_project(store: JsonStore, project: Project) -> None:
    """Drop a project from every assigned user, ahead of deleting it."""
    sync_project_users(store, project.id, project.assigned_users, [])

def detach_user(store: JsonStore, user: User) -> None:
    """Drop a user from every assigned project, ahead of deleting it."""
    sync_user_projects(store, user.id, user.assigned_projects, [])


def assign_users(store: JsonStore, project_id: str, user_ids: list[str]) -> Project | None:
    """Replace a project's user list, then reconcile every user against it."""
    project = project_crud.update_project(store, project_id, {"assigned_users": user_ids})
    if not project:
        return None

    wanted = set(project.assigned_users)
    known: set[str] = set()
    for u in user_crud.list_users(store):
        known.add(u.id)
        if u.id in wanted:
            _best_effort(_link_user, store, u.id, project_id, "link_user")
        elif project_id in u.assigned_projects:
            _best_effort(_unlink_user, store, u.id, project_id, "unlink_user")

    missing = wanted - known
    if missing:
        logger.warning("assignment_target_missing", project_id=project_id, user_ids=sorted(missing))
    logger.info("users_assigned", project_id=project_id, user_ids=project.assigned_users)
    return project
