from fastapi import APIRouter, Depends, Response

from dashboard.core.deps import get_current_user, get_locale, get_store
from dashboard.core.errors import BadRequest, NotAuthenticated, PermissionDenied
from dashboard.core.i18n import translate
from dashboard.core.logging import logger
from dashboard.core.permissions import capabilities_for
from dashboard.core.security import clear_session_cookie, issue_token, set_session_cookie
from dashboard.crud.users import authenticate
from dashboard.db.models.user import UserStatus
from dashboard.db.store import JsonStore
from dashboard.schemas.auth import LoginIn, MeOut, MessageOut, PermissionsOut, SessionUser
from dashboard.schemas.users import UserOut, UserResponse

router = APIRouter()

@router.post("/login", response_model=UserResponse)
def login(data: LoginIn, response: Response, store: JsonStore = Depends(get_store), locale: str = Depends(get_locale)):
    if not data.email or not data.password:
        raise BadRequest("credentials_required")
    user = authenticate(store, data.email, data.password)
    if not user:
        logger.info("login_failed", email=data.email)
        raise NotAuthenticated("invalid_credentials")
    if user.status != UserStatus.active:
        logger.info("login_rejected_inactive", user_id=user.id)
        raise PermissionDenied("user_inactive")

    token = issue_token(SessionUser(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role.value,
        department=user.department,
    ))
    set_session_cookie(response, token)
    logger.info("login_succeeded", user_id=user.id)
    return UserResponse(message=translate("login_succeeded", locale), user=UserOut.model_validate(user))

@router.post("/logout", response_model=MessageOut)
def logout(response: Response, locale: str = Depends(get_locale)):
    clear_session_cookie(response)
    return MessageOut(message=translate("logout_succeeded", locale))

@router.get("/me", response_model=MeOut)
def me(user: SessionUser = Depends(get_current_user)):
    return MeOut(user=user)

@router.get("/permissions", response_model=PermissionsOut)
def permissions(user: SessionUser = Depends(get_current_user)):
    caps = capabilities_for(user.role)
    return PermissionsOut(role=user.role, permissions=caps.model_dump(by_alias=True))
