import pytest
from fastapi.testclient import TestClient

from dashboard.core.config import settings
from dashboard.core.deps import get_store
from dashboard.core.security import issue_token
from dashboard.crud.users import create_user
from dashboard.db.models.user import Role
from dashboard.db.store import JsonStore
from dashboard.main import app
from dashboard.schemas.auth import SessionUser
from dashboard.schemas.users import UserCreateIn


@pytest.fixture
def store(tmp_path):
    s = JsonStore(tmp_path / "database.json")
    s.ensure_initialized()
    return s

@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def make_user(store):
    counter = iter(range(1, 10_000))

    def _make(role=Role.developer, password="secret123", **kw):
        n = next(counter)
        data = UserCreateIn(
            name=kw.pop("name", f"User {n}"),
            email=kw.pop("email", f"user{n}@example.com"),
            password=password,
            role=role,
            department=kw.pop("department", "Engineering"),
            **kw,
        )
        return create_user(store, data)
    return _make

@pytest.fixture
def login_as(client):
    """Put a valid session cookie for ``user`` on the shared test client."""
    def _login(user):
        token = issue_token(SessionUser(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role.value,
            department=user.department,
        ))
        client.cookies.clear()
        client.cookies.set(settings.SESSION_COOKIE_NAME, token)
        return client
    return _login
