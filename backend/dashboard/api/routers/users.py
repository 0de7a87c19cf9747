from fastapi import APIRouter, Depends, status

from dashboard.core.deps import get_current_user, get_locale, get_store, require_roles
from dashboard.core.errors import BadRequest, NotFound, PermissionDenied
from dashboard.core.i18n import translate
from dashboard.core.logging import logger
from dashboard.core.permissions import is_staff
from dashboard.crud.users import create_user, delete_user, get_user, list_users, update_user
from dashboard.db.models.user import Role
from dashboard.db.store import JsonStore
from dashboard.schemas.auth import MessageOut, SessionUser
from dashboard.schemas.users import UserCreateIn, UserOut, UserResponse, UsersResponse, UserUpdateIn
from dashboard.services.assignments import detach_user, sync_user_projects

router = APIRouter()

@router.get("", response_model=UsersResponse)
def users(store: JsonStore = Depends(get_store), _user=Depends(get_current_user)):
    return UsersResponse(users=[UserOut.model_validate(u) for u in list_users(store)])

@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user_endpoint(
    data: UserCreateIn,
    store: JsonStore = Depends(get_store),
    locale: str = Depends(get_locale),
    user: SessionUser = Depends(require_roles(Role.admin, Role.manager)),
):
    u = create_user(store, data)
    if u.assigned_projects:
        sync_user_projects(store, u.id, [], u.assigned_projects)
    logger.info("user_created", user_id=u.id, by=user.id)
    return UserResponse(message=translate("user_created", locale), user=UserOut.model_validate(u))

@router.get("/{user_id}", response_model=UserResponse)
def get_user_endpoint(user_id: str, store: JsonStore = Depends(get_store), _user=Depends(get_current_user)):
    u = get_user(store, user_id)
    if not u:
        raise NotFound("user_not_found")
    return UserResponse(user=UserOut.model_validate(u))

@router.put("/{user_id}", response_model=UserResponse)
def put_user(
    user_id: str,
    data: UserUpdateIn,
    store: JsonStore = Depends(get_store),
    locale: str = Depends(get_locale),
    user: SessionUser = Depends(get_current_user),
):
    # Anyone may edit their own record; only admin/manager may edit others.
    if user.id != user_id and not is_staff(user.role):
        raise PermissionDenied()
    patch = data.to_patch()
    if "role" in patch and user.role != Role.admin.value:
        raise PermissionDenied("only_admin_changes_roles")
    if "assigned_projects" in patch and not is_staff(user.role):
        raise PermissionDenied("only_staff_assigns_projects")

    existing = get_user(store, user_id)
    if not existing:
        raise NotFound("user_not_found")

    u = update_user(store, user_id, patch)
    if "assigned_projects" in patch:
        sync_user_projects(store, user_id, existing.assigned_projects, u.assigned_projects)
    logger.info("user_updated", user_id=user_id, by=user.id, fields=sorted(patch))
    return UserResponse(message=translate("user_updated", locale), user=UserOut.model_validate(u))

@router.delete("/{user_id}", response_model=MessageOut)
def delete_user_endpoint(
    user_id: str,
    store: JsonStore = Depends(get_store),
    locale: str = Depends(get_locale),
    user: SessionUser = Depends(require_roles(Role.admin, message="only_admin_deletes_users")),
):
    if user.id == user_id:
        raise BadRequest("cannot_delete_self")
    existing = get_user(store, user_id)
    if not existing:
        raise NotFound("user_not_found")

    detach_user(store, existing)
    delete_user(store, user_id)
    logger.info("user_deleted", user_id=user_id, by=user.id)
    return MessageOut(message=translate("user_deleted", locale))
