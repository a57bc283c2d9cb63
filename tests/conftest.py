# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import date, datetime, timedelta
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")
os.environ.setdefault("ADMIN_PASSWORD", "correct horse battery staple")

from neta_promise.api.v1.dependencies import create_access_token
from neta_promise.core.settings import settings
from neta_promise.db.session import Base
from neta_promise.db.session import get_db as app_get_session
from neta_promise.main import app as fastapi_app
from neta_promise.models import Ad, Party, Politician, Post, Vote
from neta_promise.services.clock import FixedDayClock, get_day_clock

TEST_DB_URL = "sqlite://"
TEST_DAY = date(2026, 3, 14)
BASE_TIME = datetime(2026, 3, 1, 12, 0, 0)

_SEQUENCE = count(1)


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture()
def day_clock() -> FixedDayClock:
    """A clock pinned to TEST_DAY; tests may move ``day_clock.day`` forward."""
    return FixedDayClock(TEST_DAY)


@pytest.fixture(autouse=True)
def override_dependencies(
    app: FastAPI, db_session: Session, day_clock: FixedDayClock
) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    app.dependency_overrides[get_day_clock] = lambda: day_clock
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)
        app.dependency_overrides.pop(get_day_clock, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    """Return authorization headers for the configured admin."""
    token = create_access_token(str(settings.admin_email))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def make_party(db_session: Session) -> Callable[..., Party]:
    def _make(name: str | None = None, **fields: Any) -> Party:
        party = Party(name=name or f"Party {next(_SEQUENCE)}", **fields)
        db_session.add(party)
        db_session.commit()
        return party

    return _make


@pytest.fixture()
def make_politician(db_session: Session) -> Callable[..., Politician]:
    def _make(name: str | None = None, party: Party | None = None, **fields: Any) -> Politician:
        politician = Politician(
            name=name or f"Politician {next(_SEQUENCE)}",
            party_id=party.id if party else None,
            **fields,
        )
        db_session.add(politician)
        db_session.commit()
        return politician

    return _make


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    """Create posts whose creation times increase with each call."""

    def _make(
        politician: Politician,
        text: str | None = None,
        location: str = "Kathmandu",
        *,
        party: Party | None = None,
        minutes: int | None = None,
    ) -> Post:
        seq = next(_SEQUENCE)
        post = Post(
            politician_id=politician.id,
            party_id=party.id if party else politician.party_id,
            promise_text=text or f"Promise {seq}",
            location=location,
            video_path=f"promise-{seq}.mp4",
            created_at=BASE_TIME + timedelta(minutes=seq if minutes is None else minutes),
        )
        db_session.add(post)
        db_session.commit()
        return post

    return _make


@pytest.fixture()
def make_ad(db_session: Session) -> Callable[..., Ad]:
    def _make(title: str | None = None, *, minutes: int | None = None) -> Ad:
        seq = next(_SEQUENCE)
        ad = Ad(
            title=title or f"Ad {seq}",
            image_path=f"ad-{seq}.png",
            contact_url=f"https://example.com/ads/{seq}",
            created_at=BASE_TIME + timedelta(minutes=seq if minutes is None else minutes),
        )
        db_session.add(ad)
        db_session.commit()
        return ad

    return _make


@pytest.fixture()
def add_votes(db_session: Session, day_clock: FixedDayClock) -> Callable[..., None]:
    """Insert votes directly, one distinct voter per vote."""

    def _add(post: Post, up: int = 0, down: int = 0, day: date | None = None) -> None:
        vote_day = day or day_clock.today()
        for direction, amount in (("up", up), ("down", down)):
            for _ in range(amount):
                db_session.add(
                    Vote(
                        post_id=post.id,
                        voter_id=f"seed-{next(_SEQUENCE)}",
                        vote_type=direction,
                        vote_date=vote_day,
                    )
                )
        db_session.commit()

    return _add


@pytest.fixture()
def politician_with_party(
    make_party: Callable[..., Party], make_politician: Callable[..., Politician]
) -> Politician:
    party = make_party("Nepali Congress")
    return make_politician("Sher Bahadur", party=party)
