from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from booking_api.auth import create_access_token
from booking_api.core import get_clock
from booking_api.db import get_session
from booking_api.main import app
from booking_api.models import File, User
from booking_api.queue import get_queue

# Monday morning, a quarter past ten
NOW = datetime(2026, 3, 2, 10, 15)


class FrozenClock:
    def __init__(self, now: datetime) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


class RecordingQueue:
    """Stands in for the ARQ queue; keeps what was enqueued."""

    def __init__(self) -> None:
        self.jobs: list[tuple[str, dict]] = []
        self.fail = False

    async def enqueue(self, job_kind: str, payload: dict) -> None:
        if self.fail:
            raise ConnectionError("redis unavailable")
        self.jobs.append((job_kind, payload))


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(NOW)


@pytest.fixture
def queue() -> RecordingQueue:
    return RecordingQueue()


@pytest.fixture
def client(session, clock, queue):
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_queue] = lambda: queue
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session):
    def _make_user(name: str, *, provider: bool = False, avatar_path: str | None = None) -> User:
        avatar_id = None
        if avatar_path is not None:
            avatar = File(name=avatar_path, path=avatar_path)
            session.add(avatar)
            session.commit()
            avatar_id = avatar.id
        user = User(
            name=name,
            email=f"{name.lower()}@example.com",
            password_hash="not-used",
            provider=provider,
            avatar_id=avatar_id,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def auth_headers():
    def _auth_headers(user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _auth_headers
