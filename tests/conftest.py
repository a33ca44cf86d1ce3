"""
Shared fixtures: an in-memory SQLite database behind the FastAPI app, an admin
token, and a stub HTTP session for the client controllers.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("ADMIN_EMAIL", "owner@raeesatours.com")

from datetime import date, timedelta

import pytest
import requests
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from raeesa_tours.core.security import create_access_token
from raeesa_tours.db.session import Base, get_db
from raeesa_tours.main import app
from raeesa_tours.models.user import User
from raeesa_tours.schemas.registration import BookingDraft, EmergencyContact
from raeesa_tours.seed import ensure_user
from raeesa_tours.services import email_service

ADMIN_EMAIL = "admin@raeesatours.com"
ADMIN_PASSWORD = "Admin@123"


@pytest.fixture
def engine():
    eng = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    s = session_factory()
    yield s
    s.close()


@pytest.fixture
def client(session_factory):
    def _get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def sent_emails(monkeypatch):
    """Capture outgoing email instead of talking to SMTP."""
    outbox = []

    def _send(to_email, subject, body, content_type="text/html"):
        outbox.append({"to": to_email, "subject": subject, "body": body})

    monkeypatch.setattr(email_service, "send_email", _send)
    return outbox


@pytest.fixture
def admin_user(db) -> User:
    ensure_user(db, ADMIN_EMAIL, ADMIN_PASSWORD, "admin", "admin")
    return db.query(User).filter(User.email == ADMIN_EMAIL).one()


@pytest.fixture
def admin_token(admin_user) -> str:
    return create_access_token(admin_user.id)


@pytest.fixture
def auth_headers(admin_token) -> dict:
    return {"Authorization": f"Bearer {admin_token}"}


def ddmmyyyy(d: date) -> str:
    return d.strftime("%d/%m/%Y")


@pytest.fixture
def valid_draft() -> BookingDraft:
    today = date.today()
    return BookingDraft(
        firstName="Al",
        lastName="Lee",
        email="a@b.com",
        phone="+91 7006276358",
        destination="Gulmarg",
        departureDate=ddmmyyyy(today + timedelta(days=1)),
        returnDate=ddmmyyyy(today + timedelta(days=3)),
        adults="2",
        emergencyContact=EmergencyContact(name="Sara Lee", phone="+91 9906012345", relation="Sister"),
        streetAddress="12 Boulevard Road",
        city="Srinagar",
        stateProvince="Jammu and Kashmir",
        postalCode="190001",
        country="India",
        termsAccepted=True,
    )


class StubResponse:
    def __init__(self, status_code: int, body=None, raw: str | None = None):
        self.status_code = status_code
        self._body = body
        self._raw = raw

    def json(self):
        if self._raw is not None:
            raise ValueError("not json")
        return self._body


class StubSession:
    """Stands in for requests.Session; replies are queued per (METHOD, path)."""

    def __init__(self):
        self.calls = []
        self.replies = {}

    def reply(self, method: str, path: str, status_code: int = 200, body=None, raw=None, exc=None):
        self.replies.setdefault((method, path), []).append((status_code, body, raw, exc))

    def request(self, method, url, **kwargs):
        path = "/" + url.split("://", 1)[-1].split("/", 1)[-1]
        self.calls.append({"method": method, "path": path, **kwargs})
        queue = self.replies.get((method, path))
        if not queue:
            raise AssertionError(f"unexpected call {method} {path}")
        status_code, body, raw, exc = queue.pop(0) if len(queue) > 1 else queue[0]
        if exc is not None:
            raise exc
        return StubResponse(status_code, body, raw)


@pytest.fixture
def stub_session() -> StubSession:
    return StubSession()


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
