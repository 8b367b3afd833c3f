from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from ballot_registry.api.deps import get_clock, get_db_session
from ballot_registry.api.routes.auth import create_access_token
from ballot_registry.core.config import get_settings
from ballot_registry.main import app
from ballot_registry.models import Base
from ballot_registry.voting import InMemoryVotingState, ManualClock, VotingState
from ballot_registry.voting.sql import SqlVotingState

ADMIN = get_settings().admin_identity
START_TIME = 1_700_000_000

DATABASE_URL = "sqlite+pysqlite://"


engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock(start=START_TIME)


@pytest.fixture()
def db_session() -> Iterator[Session]:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture()
def memory_state() -> InMemoryVotingState:
    return InMemoryVotingState(ADMIN)


@pytest.fixture()
def sql_state(db_session: Session) -> SqlVotingState:
    return SqlVotingState.bootstrap(db_session, admin_identity=ADMIN)


@pytest.fixture(params=["memory", "sql"])
def state(request: pytest.FixtureRequest) -> VotingState:
    """Run a test once against each voting state implementation."""
    return request.getfixturevalue(f"{request.param}_state")


@pytest.fixture()
def client(db_session: Session, clock: ManualClock) -> Iterator[TestClient]:
    def override_get_db() -> Iterator[Session]:
        try:
            yield db_session
        finally:
            db_session.rollback()

    app.dependency_overrides[get_db_session] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.pop(get_db_session, None)
    app.dependency_overrides.pop(get_clock, None)


@pytest.fixture()
def headers_for() -> Callable[[str], dict[str, str]]:
    def _headers(identity: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(identity)}"}

    return _headers


@pytest.fixture()
def admin_headers(headers_for: Callable[[str], dict[str, str]]) -> dict[str, str]:
    return headers_for(ADMIN)
