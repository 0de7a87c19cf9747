from dashboard.core.permissions import is_staff
from dashboard.db.models._mixins import new_id, now_iso
from dashboard.db.models.project import Comment, Project
from dashboard.db.store import JsonStore
from dashboard.schemas.auth import SessionUser
from dashboard.schemas.project import ProjectCreate

COLLECTION = "projects"


def list_projects(store: JsonStore, viewer: SessionUser | None = None) -> list[Project]:
    """All projects, or for non-staff viewers only the ones they are assigned to."""
    projects = [Project.model_validate(raw) for raw in store.all(COLLECTION)]
    if viewer is None or is_staff(viewer.role):
        return projects
    return [p for p in projects if viewer.id in p.assigned_users]

def get_project(store: JsonStore, project_id: str) -> Project | None:
    raw = store.get(COLLECTION, project_id)
    return Project.model_validate(raw) if raw else None

def create_project(store: JsonStore, data: ProjectCreate) -> Project:
    now = now_iso()
    p = Project(
        id=new_id("project"),
        name=data.name.strip(),
        description=data.description.strip(),
        client=data.client.strip(),
        status=data.status,
        environments=data.environments,
        tech_stack=list(data.tech_stack),
        docs_url=data.docs_url,
        gitlab_url=data.gitlab_url,
        comments=[],
        assigned_users=list(dict.fromkeys(data.assigned_users)),
        created_at=now,
        updated_at=now,
    )
    store.set(COLLECTION, p.to_document())
    return p


def update_project(store: JsonStore, project_id: str, patch: dict) -> Project | None:
    """Merge ``patch`` (snake_case keys) into the stored project."""
    p = get_project(store, project_id)
    if not p:
        return None
    patch = dict(patch)
    patch.pop("id", None)
    patch.pop("comments", None)
    if "assigned_users" in patch:
        patch["assigned_users"] = list(dict.fromkeys(patch["assigned_users"]))

    data = p.model_dump()
    data.update(patch)
    data["updated_at"] = now_iso()
    updated = Project.model_validate(data)
    store.set(COLLECTION, updated.to_document())
    return updated

def delete_project(store: JsonStore, project_id: str) -> bool:
    return store.delete(COLLECTION, project_id)


def add_comment(store: JsonStore, project_id: str, text: str, author: str) -> Project | None:
    p = get_project(store, project_id)
    if not p:
        return None
    p.comments.append(Comment(id=new_id("comment"), text=text, author=author, date=now_iso()))
    p.updated_at = now_iso()
    store.set(COLLECTION, p.to_document())
    return p

def remove_comment(store: JsonStore, project_id: str, comment_id: str) -> Project | None:
    p = get_project(store, project_id)
    if not p:
        return None
    p.comments = [c for c in p.comments if c.id != comment_id]
    p.updated_at = now_iso()
    store.set(COLLECTION, p.to_document())
    return p
