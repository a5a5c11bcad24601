"""
Shared fixtures: an app per test on its own SQLite file, a fake model
client and a recorded outbound HTTP transport.
"""
import asyncio
from typing import Callable, List, Optional

import httpx
import pytest
from sqlmodel import Session, SQLModel, create_engine, func, select
from starlette.testclient import TestClient

from founderflow.config import Settings
from founderflow.core.security import create_access_token
from founderflow.main import create_app
from founderflow.services.integrations.base import MessageGenerator

TEST_SECRET = "test-secret"
ADMIN_EMAIL = "admin@founderflow.test"


class FakeGenerator(MessageGenerator):
    """Records every call instead of talking to Gemini."""

    def __init__(self, reply: str = "Hi Dana, loved what Acme is building."):
        self.reply = reply
        self.error: Optional[Exception] = None
        self.calls: List[dict] = []

    async def generate(self, prompt: str, pdf_base64: Optional[str] = None) -> str:
        self.calls.append({"prompt": prompt, "pdf_base64": pdf_base64})
        if self.error:
            raise self.error
        return self.reply


class Outbound:
    """httpx.MockTransport handler that keeps every request it sees."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(404)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


class Database:
    """Synchronous access to the app's SQLite file for seeding and assertions."""

    def __init__(self, url: str):
        self.engine = create_engine(url)

    def add(self, *objects: SQLModel) -> None:
        with Session(self.engine) as session:
            for obj in objects:
                session.add(obj)
            session.commit()

    def get(self, model, id):
        with Session(self.engine) as session:
            return session.get(model, id)

    def all(self, model) -> list:
        with Session(self.engine) as session:
            return session.exec(select(model)).all()

    def count(self, model) -> int:
        with Session(self.engine) as session:
            return session.exec(select(func.count()).select_from(model)).one()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "founderflow.db"


@pytest.fixture
def settings(db_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{db_path}",
        AUTH_JWT_SECRET=TEST_SECRET,
        ADMIN_EMAIL=ADMIN_EMAIL,
        GEMINI_API_KEY=None,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def outbound():
    return Outbound()


@pytest.fixture
def http_client(outbound):
    client = httpx.AsyncClient(transport=httpx.MockTransport(outbound))
    yield client
    asyncio.run(client.aclose())


@pytest.fixture
def app(settings, generator, http_client):
    return create_app(settings, message_generator=generator, http_client=http_client)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(client, db_path):
    """Depends on client so the tables exist before seeding."""
    database = Database(f"sqlite:///{db_path}")
    yield database
    database.engine.dispose()


@pytest.fixture
def make_headers():
    def _make(user_id: str = "user_1", email: Optional[str] = "dana@example.com", verified: bool = True) -> dict:
        token = create_access_token(
            {"sub": user_id, "email": email, "email_verified": verified},
            TEST_SECRET,
        )
        return {"Authorization": f"Bearer {token}"}
    return _make


@pytest.fixture
def user_headers(make_headers):
    return make_headers()


@pytest.fixture
def admin_headers(make_headers):
    return make_headers(user_id="admin_1", email=ADMIN_EMAIL)
