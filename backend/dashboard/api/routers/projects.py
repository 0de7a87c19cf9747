from fastapi import APIRouter, Depends, status

from dashboard.core.deps import get_current_user, get_locale, get_store, require_roles
from dashboard.core.errors import BadRequest, NotFound, PermissionDenied
from dashboard.core.i18n import translate
from dashboard.core.logging import logger
from dashboard.core.permissions import is_staff
from dashboard.crud.projects import (
    add_comment,
    create_project,
    delete_project,
    get_project,
    list_projects,
    remove_comment,
    update_project,
)
from dashboard.db.models.project import Project
from dashboard.db.models.user import Role
from dashboard.db.store import JsonStore
from dashboard.schemas.auth import MessageOut, SessionUser
from dashboard.schemas.project import (
    AssignUsersIn,
    CommentIn,
    ProjectCreate,
    ProjectResponse,
    ProjectsResponse,
    ProjectUpdate,
)
from dashboard.services.assignments import assign_users, detach_project, sync_project_users

router = APIRouter()

STAFF = (Role.admin, Role.manager)


def _load_visible(store: JsonStore, project_id: str, user: SessionUser) -> Project:
    p = get_project(store, project_id)
    if not p:
        raise NotFound("project_not_found")
    if not is_staff(user.role) and user.id not in p.assigned_users:
        raise PermissionDenied("project_forbidden")
    return p

def _validate_patch(patch: dict) -> None:
    if "name" in patch and len(patch["name"].strip()) < 2:
        raise BadRequest("project_name_too_short")
    if "description" in patch and len(patch["description"].strip()) < 10:
        raise BadRequest("project_description_too_short")
    if "client" in patch and len(patch["client"].strip()) < 2:
        raise BadRequest("project_client_required")


@router.get("", response_model=ProjectsResponse)
def get_projects(store: JsonStore = Depends(get_store), user: SessionUser = Depends(get_current_user)):
    return ProjectsResponse(projects=list_projects(store, viewer=user))

@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def post_project(
    data: ProjectCreate,
    store: JsonStore = Depends(get_store),
    locale: str = Depends(get_locale),
    user: SessionUser = Depends(require_roles(*STAFF)),
):
    if not data.name.strip() or not data.description.strip() or not data.client.strip():
        raise BadRequest("project_fields_required")
    p = create_project(store, data)
    if p.assigned_users:
        sync_project_users(store, p.id, [], p.assigned_users)
    logger.info("project_created", project_id=p.id, by=user.id)
    return ProjectResponse(message=translate("project_created", locale), project=p)


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project_endpoint(
    project_id: str,
    store: JsonStore = Depends(get_store),
    user: SessionUser = Depends(get_current_user),
):
    return ProjectResponse(project=_load_visible(store, project_id, user))

@router.put("/{project_id}", response_model=ProjectResponse)
def put_project(
    project_id: str,
    data: ProjectUpdate,
    store: JsonStore = Depends(get_store),
    locale: str = Depends(get_locale),
    user: SessionUser = Depends(require_roles(*STAFF)),
):
    existing = get_project(store, project_id)
    if not existing:
        raise NotFound("project_not_found")
    patch = data.to_patch()
    _validate_patch(patch)

    p = update_project(store, project_id, patch)
    if "assigned_users" in patch:
        sync_project_users(store, project_id, existing.assigned_users, p.assigned_users)
    logger.info("project_updated", project_id=project_id, by=user.id, fields=sorted(patch))
    return ProjectResponse(message=translate("project_updated", locale), project=p)

@router.delete("/{project_id}", response_model=MessageOut)
def delete_project_endpoint(
    project_id: str,
    store: JsonStore = Depends(get_store),
    locale: str = Depends(get_locale),
    user: SessionUser = Depends(require_roles(Role.admin, message="only_admin_deletes_projects")),
):
    existing = get_project(store, project_id)
    if not existing:
        raise NotFound("project_not_found")
    detach_project(store, existing)
    delete_project(store, project_id)
    logger.info("project_deleted", project_id=project_id, by=user.id)
    return MessageOut(message=translate("project_deleted", locale))


@router.post("/{project_id}/assign-users", response_model=ProjectResponse)
def assign_users_endpoint(
    project_id: str,
    data: AssignUsersIn,
    store: JsonStore = Depends(get_store),
    locale: str = Depends(get_locale),
    user: SessionUser = Depends(require_roles(*STAFF)),
):
    if not isinstance(data.user_ids, list) or not all(isinstance(i, str) for i in data.user_ids):
        raise BadRequest("user_ids_must_be_list")
    if not get_project(store, project_id):
        raise NotFound("project_not_found")
    p = assign_users(store, project_id, data.user_ids)
    return ProjectResponse(message=translate("users_assigned", locale), project=p)


@router.post("/{project_id}/comments", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def post_comment(
    project_id: str,
    data: CommentIn,
    store: JsonStore = Depends(get_store),
    locale: str = Depends(get_locale),
    user: SessionUser = Depends(get_current_user),
):
    _load_visible(store, project_id, user)
    if not data.text.strip():
        raise BadRequest()
    p = add_comment(store, project_id, data.text.strip(), author=user.name)
    return ProjectResponse(message=translate("comment_added", locale), project=p)

@router.delete("/{project_id}/comments/{comment_id}", response_model=ProjectResponse)
def delete_comment(
    project_id: str,
    comment_id: str,
    store: JsonStore = Depends(get_store),
    locale: str = Depends(get_locale),
    user: SessionUser = Depends(get_current_user),
):
    p = _load_visible(store, project_id, user)
    comment = next((c for c in p.comments if c.id == comment_id), None)
    if not comment:
        raise NotFound("comment_not_found")
    if comment.author != user.name and not is_staff(user.role):
        raise PermissionDenied()
    p = remove_comment(store, project_id, comment_id)
    return ProjectResponse(message=translate("comment_removed", locale), project=p)
