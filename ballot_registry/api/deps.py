"""Common dependencies for API routes."""
from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from ballot_registry.core.config import get_settings
from ballot_registry.db.session import SessionLocal
from ballot_registry.voting import Clock, SystemClock, VotingState
from ballot_registry.voting.sql import SqlVotingState

_system_clock = SystemClock()


def get_db_session() -> Iterator[Session]:
    """Yield a database session for FastAPI dependencies."""

    session: Session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def get_clock() -> Clock:
    return _system_clock


def get_voting_state(session: Session = Depends(get_db_session)) -> VotingState:
    """Bind the voting state to the request's session."""

    settings = get_settings()
    return SqlVotingState.bootstrap(session, admin_identity=settings.admin_identity)


__all__ = ["get_clock", "get_db_session", "get_voting_state"]
