"""Shared pytest fixtures: SQLite in-memory database, app client and in-memory repositories."""

import logging
import os
import tempfile
from datetime import datetime, timedelta, timezone
from itertools import count

# Settings are read once at import time, so the test environment goes in first
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="collabnotes-logs-"))
os.environ["COLLABNOTES_SKIP_LIFESPAN_DB"] = "1"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from collabnotes.core.exceptions import ConflictError
from collabnotes.core.models import BaseModel, Note, NoteCollaborator, User
from collabnotes.core.repositories.interfaces import (
    ICollaboratorRepository,
    INoteRepository,
    IUserRepository,
)
from collabnotes.database import enable_sqlite_foreign_keys, get_db_session
from collabnotes.main import app
from collabnotes.security.jwt import create_access_token

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest.fixture
async def test_engine():
    """Fresh SQLite in-memory engine per test, foreign keys enforced."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine.sync_engine)

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_maker(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def test_app(session_maker):
    """App with each request getting its own session on the test database."""

    async def _override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


def bearer(user_id: int, email: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'id': user_id, 'email': email})}"}


@pytest.fixture
def auth_headers():
    """Build ``Authorization`` headers for an identity."""
    return bearer


# ---------------------------------------------------------------------------
# In-memory repositories
# ---------------------------------------------------------------------------


class InMemoryStore:
    """Rows shared by the fake repositories, mirroring the three tables."""

    def __init__(self):
        self.users: dict[int, User] = {}
        self.notes: dict[int, Note] = {}
        self.collaborators: list[NoteCollaborator] = []
        self._ids = {"users": count(1), "notes": count(1), "collaborators": count(1)}
        # monotonic clock so ordering by updated_at is deterministic
        self._clock = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def next_id(self, table: str) -> int:
        return next(self._ids[table])

    def now(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock


class FakeUserRepository(IUserRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def find_by_email(self, email):
        return next((u for u in self.store.users.values() if u.email == email), None)

    async def find_by_id(self, user_id):
        return self.store.users.get(user_id)

    async def create(self, email, password_hash):
        if await self.find_by_email(email) is not None:
            raise ConflictError("Email is already registered")
        user = User(
            id=self.store.next_id("users"),
            email=email,
            password_hash=password_hash,
            created_at=self.store.now(),
        )
        self.store.users[user.id] = user
        return user

    async def save(self, user):
        self.store.users[user.id] = user
        return user


class FakeNoteRepository(INoteRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def create(self, title, content, owner_id):
        now = self.store.now()
        note = Note(
            id=self.store.next_id("notes"),
            title=title,
            content=content,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        self.store.notes[note.id] = note
        return note

    async def save(self, note):
        self.store.notes[note.id] = note
        return note

    async def find_one(self, note_id):
        return self.store.notes.get(note_id)

    async def find_by_owner(self, owner_id):
        own = [n for n in self.store.notes.values() if n.owner_id == owner_id]
        return sorted(own, key=lambda n: (n.updated_at, n.id), reverse=True)

    async def find_shared_with(self, user_id):
        note_ids = [c.note_id for c in self.store.collaborators if c.user_id == user_id]
        return [self.store.notes[i] for i in reversed(note_ids) if i in self.store.notes]

    async def remove(self, note):
        self.store.notes.pop(note.id, None)
        # ON DELETE CASCADE
        self.store.collaborators = [c for c in self.store.collaborators if c.note_id != note.id]


class FakeCollaboratorRepository(ICollaboratorRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store
        self.created = 0

    async def find_by_user(self, user_id):
        return [c for c in self.store.collaborators if c.user_id == user_id]

    async def find_by_note(self, note_id):
        return [c for c in self.store.collaborators if c.note_id == note_id]

    async def find_one(self, note_id, user_id):
        return next(
            (c for c in self.store.collaborators if c.note_id == note_id and c.user_id == user_id),
            None,
        )

    async def create(self, note_id, user_id):
        # unique index, independent of find_one
        if any(c.note_id == note_id and c.user_id == user_id for c in self.store.collaborators):
            raise ConflictError("User is already a collaborator")
        row = NoteCollaborator(
            id=self.store.next_id("collaborators"),
            note_id=note_id,
            user_id=user_id,
            created_at=self.store.now(),
        )
        self.store.collaborators.append(row)
        self.created += 1
        return row


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def user_repo(store):
    return FakeUserRepository(store)


@pytest.fixture
def note_repo(store):
    return FakeNoteRepository(store)


@pytest.fixture
def collaborator_repo(store):
    return FakeCollaboratorRepository(store)


@pytest.fixture
async def users(user_repo):
    """Three registered users: a (owner), b (collaborator), c (unrelated)."""
    return {
        name: await user_repo.create(f"{name}@x.com", "not-a-real-hash")
        for name in ("a", "b", "c")
    }
