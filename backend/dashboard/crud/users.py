from datetime import datetime, timezone

from dashboard.core.errors import Conflict
from dashboard.core.security import hash_password, verify_password
from dashboard.db.models._mixins import new_id, now_iso
from dashboard.db.models.user import User
from dashboard.db.store import JsonStore
from dashboard.schemas.users import UserCreateIn

COLLECTION = "users"


def _avatar_for(name: str) -> str:
    first = name.split(" ")[0].lower() if name else "user"
    return f"/placeholder.svg?height=40&width=40&query=avatar-{first}"

def get_user(store: JsonStore, user_id: str) -> User | None:
    raw = store.get(COLLECTION, user_id)
    return User.model_validate(raw) if raw else None

def get_user_by_email(store: JsonStore, email: str) -> User | None:
    raw = store.find(COLLECTION, email=email)
    return User.model_validate(raw) if raw else None

def list_users(store: JsonStore) -> list[User]:
    return [User.model_validate(raw) for raw in store.all(COLLECTION)]

def create_user(store: JsonStore, data: UserCreateIn, user_id: str | None = None) -> User:
    if get_user_by_email(store, data.email):
        raise Conflict("email_in_use")
    assigned = list(dict.fromkeys(data.assigned_projects))
    now = now_iso()
    u = User(
        id=user_id or new_id("user"),
        name=data.name,
        email=data.email,
        password=hash_password(data.password),
        role=data.role,
        department=data.department,
        status=data.status,
        avatar=_avatar_for(data.name),
        join_date=datetime.now(timezone.utc).date().isoformat(),
        projects_count=len(assigned),
        assigned_projects=assigned,
        created_at=now,
        updated_at=now,
    )
    store.set(COLLECTION, u.to_document())
    return u

def update_user(store: JsonStore, user_id: str, patch: dict) -> User | None:
    """Merge ``patch`` (snake_case keys) into the stored user."""
    u = get_user(store, user_id)
    if not u:
        return None
    patch = dict(patch)
    patch.pop("id", None)

    new_email = patch.get("email")
    if new_email and new_email != u.email:
        other = get_user_by_email(store, new_email)
        if other and other.id != user_id:
            raise Conflict("email_in_use")

    if patch.get("password"):
        patch["password"] = hash_password(patch["password"])
    else:
        patch.pop("password", None)

    if "assigned_projects" in patch:
        patch["assigned_projects"] = list(dict.fromkeys(patch["assigned_projects"]))
        patch["projects_count"] = len(patch["assigned_projects"])

    data = u.model_dump()
    data.update(patch)
    data["updated_at"] = now_iso()
    updated = User.model_validate(data)
    store.set(COLLECTION, updated.to_document())
    return updated

def delete_user(store: JsonStore, user_id: str) -> bool:
    return store.delete(COLLECTION, user_id)

def record_login(store: JsonStore, user_id: str) -> User | None:
    return update_user(store, user_id, {"last_login": now_iso()})

def authenticate(store: JsonStore, email: str, password: str) -> User | None:
    u = get_user_by_email(store, email)
    if not u or not verify_password(password, u.password):
        return None
    return record_login(store, u.id) or u
