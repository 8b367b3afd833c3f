"""SQLAlchemy-backed voting state.

All four pieces of state live in one database so each write commits them
together inside a single SERIALIZABLE transaction.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from sqlalchemy import text
from sqlalchemy.orm import Session

from ballot_registry.models import (
    REGISTRY_ROW_ID,
    BallotRecord,
    ChoiceRecord,
    RegistryRecord,
    VoteRecord,
    VoterRecord,
)
from ballot_registry.voting.state import Ballot, Choice, VotingState

logger = logging.getLogger(__name__)

# Ballot ids are stored in 32-bit INTEGER columns.
MAX_STORED_BALLOT_ID = 2**31 - 1


@contextmanager
def serializable_transaction(session: Session) -> Iterator[None]:
    """Context manager enforcing SERIALIZABLE isolation for the transaction."""

    bind = session.get_bind()
    if bind is None:
        raise RuntimeError("Session is not bound to an engine")

    dialect = bind.dialect.name
    if dialect == "sqlite":
        session.execute(text("BEGIN IMMEDIATE"))
    else:
        session.execute(text("SET TRANSACTION ISOLATION LEVEL SERIALIZABLE"))

    try:
        yield
        session.commit()
    except Exception:
        session.rollback()
        raise


def _storable(ballot_id: int) -> bool:
    return 0 <= ballot_id <= MAX_STORED_BALLOT_ID


def _snapshot(record: BallotRecord) -> Ballot:
    choices = tuple(
        Choice(id=choice.position, name=choice.name, vote_count=choice.vote_count)
        for choice in record.choices
    )
    return Ballot(id=record.id, name=record.name, choices=choices, end=record.end_time)


class SqlVotingState(VotingState):
    """Voting state persisted through a SQLAlchemy session."""

    def __init__(self, session: Session, admin: str) -> None:
        super().__init__(admin)
        self._session = session

    @classmethod
    def bootstrap(cls, session: Session, *, admin_identity: str) -> SqlVotingState:
        """Load the registry, creating it with ``admin_identity`` on first use.

        The stored admin is never replaced; a different configured identity is
        ignored with a warning. The session is left outside any transaction so
        the next write can open its own serializable one.
        """

        registry = session.get(RegistryRecord, REGISTRY_ROW_ID)
        if registry is None:
            session.rollback()
            with serializable_transaction(session):
                registry = session.get(RegistryRecord, REGISTRY_ROW_ID)
                if registry is None:
                    registry = RegistryRecord(
                        id=REGISTRY_ROW_ID, admin_identity=admin_identity, next_ballot_id=0
                    )
                    session.add(registry)
                    session.flush()
                    logger.info("initialised ballot registry", extra={"admin": admin_identity})

        stored_admin = registry.admin_identity
        session.rollback()
        if stored_admin != admin_identity:
            logger.warning(
                "configured admin differs from stored admin; keeping stored admin",
                extra={"configured": admin_identity, "stored": stored_admin},
            )
        return cls(session, stored_admin)

    @contextmanager
    def read(self) -> Iterator[SqlVotingState]:
        try:
            yield self
        finally:
            self._session.rollback()

    @contextmanager
    def write(self) -> Iterator[SqlVotingState]:
        with serializable_transaction(self._session):
            yield self

    def _registry(self) -> RegistryRecord:
        registry = self._session.get(RegistryRecord, REGISTRY_ROW_ID)
        if registry is None:
            raise RuntimeError("ballot registry has not been bootstrapped")
        return registry

    def is_voter(self, identity: str) -> bool:
        voter = self._session.get(VoterRecord, identity)
        return voter is not None and voter.eligible

    def enable_voter(self, identity: str) -> bool:
        voter = self._session.get(VoterRecord, identity)
        if voter is not None:
            return False
        self._session.add(VoterRecord(identity=identity, eligible=True))
        self._session.flush()
        return True

    def find_ballot(self, ballot_id: int) -> Ballot | None:
        if not _storable(ballot_id):
            return None
        record = self._session.get(BallotRecord, ballot_id)
        if record is None:
            return None
        return _snapshot(record)

    def append_ballot(self, name: str, choice_names: Sequence[str], end: int) -> Ballot:
        registry = self._registry()
        record = BallotRecord(
            id=registry.next_ballot_id,
            name=name,
            end_time=end,
            choices=[
                ChoiceRecord(position=index, name=choice_name, vote_count=0)
                for index, choice_name in enumerate(choice_names)
            ],
        )
        self._session.add(record)
        registry.next_ballot_id += 1
        self._session.flush()
        return _snapshot(record)

    def next_ballot_id(self) -> int:
        return self._registry().next_ballot_id

    def has_voted(self, voter: str, ballot_id: int) -> bool:
        if not _storable(ballot_id):
            return False
        return self._session.get(VoteRecord, (voter, ballot_id)) is not None

    def record_vote(self, voter: str, ballot_id: int, choice_index: int) -> None:
        choice = self._session.get(ChoiceRecord, (ballot_id, choice_index))
        if choice is None:
            raise RuntimeError(f"choice {choice_index} of ballot {ballot_id} is missing")
        self._session.add(VoteRecord(voter=voter, ballot_id=ballot_id))
        choice.vote_count += 1
        self._session.flush()


__all__ = ["MAX_STORED_BALLOT_ID", "SqlVotingState", "serializable_transaction"]
