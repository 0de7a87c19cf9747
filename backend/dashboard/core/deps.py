from fastapi import Depends, Request

from dashboard.core.config import settings
from dashboard.core.errors import NotAuthenticated, PermissionDenied
from dashboard.core.i18n import resolve_locale
from dashboard.core.security import verify_token
from dashboard.db.models.user import Role
from dashboard.db.store import JsonStore
from dashboard.schemas.auth import SessionUser

def get_store() -> JsonStore:
    return JsonStore(settings.DATABASE_PATH)

def get_locale(request: Request) -> str:
    return resolve_locale(request.headers.get("accept-language"))

def get_session(request: Request) -> SessionUser | None:
    return verify_token(request.cookies.get(settings.SESSION_COOKIE_NAME))

def get_current_user(session: SessionUser | None = Depends(get_session)) -> SessionUser:
    if session is None:
        raise NotAuthenticated()
    return session

def require_roles(*roles: Role, message: str = "insufficient_permissions"):
    allowed = {r.value for r in roles}

    def _dep(user: SessionUser = Depends(get_current_user)) -> SessionUser:
        if user.role not in allowed:
            raise PermissionDenied(message)
        return user
    return _dep
