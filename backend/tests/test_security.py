import datetime as dt

from jose import jwt

from dashboard.core.config import settings
from dashboard.core.security import hash_password, issue_token, verify_password, verify_token
from dashboard.schemas.auth import SessionUser

SESSION = SessionUser(id="u-1", name="Ana", email="ana@example.com", role="developer", department="QA")


def test_hash_is_salted_and_verifies():
    h1 = hash_password("admin123")
    h2 = hash_password("admin123")
    assert h1 != h2
    assert h1 != "admin123"
    assert verify_password("admin123", h1)
    assert not verify_password("wrong", h1)

def test_verify_password_with_garbage_hash():
    assert not verify_password("admin123", "not-a-hash")
    assert not verify_password("admin123", None)

def test_token_roundtrip():
    claims = verify_token(issue_token(SESSION))
    assert claims == SESSION

def test_token_expires_in_a_day():
    payload = jwt.get_unverified_claims(issue_token(SESSION))
    assert payload["exp"] - payload["iat"] == 24 * 60 * 60

def test_tampered_token_is_rejected():
    header, _, signature = issue_token(SESSION).split(".")
    forged = jwt.encode({**SESSION.model_dump(), "role": "admin"}, "x", algorithm="HS256").split(".")[1]
    assert verify_token(f"{header}.{forged}.{signature}") is None

def test_wrong_secret_is_rejected():
    token = jwt.encode(SESSION.model_dump(), "other-secret", algorithm=settings.JWT_ALG)
    assert verify_token(token) is None

def test_expired_token_is_rejected():
    past = dt.datetime.now(dt.timezone.utc) - dt.timedelta(hours=1)
    payload = {**SESSION.model_dump(), "exp": int(past.timestamp())}
    token = jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)
    assert verify_token(token) is None

def test_missing_claim_is_rejected():
    payload = SESSION.model_dump()
    del payload["department"]
    token = jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)
    assert verify_token(token) is None

def test_malformed_tokens():
    assert verify_token("") is None
    assert verify_token(None) is None
    assert verify_token("a.b.c") is None
