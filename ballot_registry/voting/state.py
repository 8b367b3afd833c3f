"""The voting state aggregate and the snapshots it hands out.

A :class:`VotingState` bundles the four pieces of shared state (admin,
voter registry, ballot store and vote records) behind one interface so every
operation can be written once and run against either the in-memory or the SQL
implementation.
"""
from __future__ import annotations

import abc
from collections.abc import Sequence
from contextlib import AbstractContextManager
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Choice:
    """One selectable option of a ballot and its running vote count."""

    id: int
    name: str
    vote_count: int = 0


@dataclass(frozen=True, slots=True)
class Ballot:
    """Read-only snapshot of a ballot."""

    id: int
    name: str
    choices: tuple[Choice, ...]
    end: int


class VotingState(abc.ABC):
    """Shared state every voting operation runs against.

    Write operations must run inside :meth:`write`, which serialises them so a
    check followed by a mutation is one atomic step. Readers use :meth:`read`.
    The primitive accessors below perform no validation; the operations in
    :mod:`ballot_registry.voting` own all checks.
    """

    def __init__(self, admin: str) -> None:
        if not admin:
            raise ValueError("an admin identity is required")
        self._admin = admin

    @property
    def admin(self) -> str:
        return self._admin

    @abc.abstractmethod
    def read(self) -> AbstractContextManager[VotingState]:
        """Scope in which reads observe a consistent state."""

    @abc.abstractmethod
    def write(self) -> AbstractContextManager[VotingState]:
        """Scope in which a write is applied atomically or not at all."""

    @abc.abstractmethod
    def is_voter(self, identity: str) -> bool: ...

    @abc.abstractmethod
    def enable_voter(self, identity: str) -> bool:
        """Mark ``identity`` eligible; return ``True`` if it was not already."""

    @abc.abstractmethod
    def find_ballot(self, ballot_id: int) -> Ballot | None: ...

    @abc.abstractmethod
    def append_ballot(self, name: str, choice_names: Sequence[str], end: int) -> Ballot:
        """Store a new ballot under the next id and advance the counter."""

    @abc.abstractmethod
    def next_ballot_id(self) -> int: ...

    @abc.abstractmethod
    def has_voted(self, voter: str, ballot_id: int) -> bool: ...

    @abc.abstractmethod
    def record_vote(self, voter: str, ballot_id: int, choice_index: int) -> None:
        """Mark the vote record and increment the chosen choice's count."""


__all__ = ["Ballot", "Choice", "VotingState"]
