from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from passlib.exc import UnknownHashError
from fastapi import Response

from dashboard.core.config import settings
from dashboard.schemas.auth import SessionUser

# Fixed cost parameters so every stored hash is produced with the same work factor.
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__time_cost=3,
    argon2__memory_cost=65536,
    argon2__parallelism=4,
)

SESSION_CLAIMS = ("id", "name", "email", "role", "department")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    try:
        return pwd_context.verify(password, password_hash)
    except (UnknownHashError, ValueError):
        return False

def issue_token(user: SessionUser) -> str:
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=settings.JWT_EXPIRES_MIN)
    payload = user.model_dump(mode="json")
    payload.update({"iat": int(now.timestamp()), "exp": int(exp.timestamp())})
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)

def verify_token(token: str | None) -> SessionUser | None:
    """Decode a session token, returning ``None`` for anything that is not a valid session."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALG])
    except JWTError:
        return None
    if not all(isinstance(payload.get(k), str) for k in SESSION_CLAIMS):
        return None
    return SessionUser(**{k: payload[k] for k in SESSION_CLAIMS})


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.JWT_EXPIRES_MIN * 60,
        path="/",
        secure=settings.ENV == "prod",
        httponly=True,
        samesite="lax",
    )

def clear_session_cookie(response: Response) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value="",
        max_age=0,
        path="/",
        secure=settings.ENV == "prod",
        httponly=True,
        samesite="lax",
    )
