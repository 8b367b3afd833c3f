"""Process-local voting state guarded by a single lock."""
from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from threading import RLock

from ballot_registry.voting.state import Ballot, Choice, VotingState


@dataclass(slots=True)
class _StoredBallot:
    id: int
    name: str
    choice_names: tuple[str, ...]
    end: int
    vote_counts: list[int] = field(default_factory=list)

    def snapshot(self) -> Ballot:
        choices = tuple(
            Choice(id=index, name=name, vote_count=self.vote_counts[index])
            for index, name in enumerate(self.choice_names)
        )
        return Ballot(id=self.id, name=self.name, choices=choices, end=self.end)


class InMemoryVotingState(VotingState):
    """Thread-safe in-memory state used for tests and embedded use."""

    def __init__(self, admin: str) -> None:
        super().__init__(admin)
        self._voters: dict[str, bool] = {}
        self._ballots: list[_StoredBallot] = []
        self._votes: set[tuple[str, int]] = set()
        self._lock = RLock()

    @contextmanager
    def read(self) -> Iterator[InMemoryVotingState]:
        with self._lock:
            yield self

    @contextmanager
    def write(self) -> Iterator[InMemoryVotingState]:
        with self._lock:
            yield self

    def is_voter(self, identity: str) -> bool:
        return self._voters.get(identity, False)

    def enable_voter(self, identity: str) -> bool:
        if self._voters.get(identity, False):
            return False
        self._voters[identity] = True
        return True

    def find_ballot(self, ballot_id: int) -> Ballot | None:
        if 0 <= ballot_id < len(self._ballots):
            return self._ballots[ballot_id].snapshot()
        return None

    def append_ballot(self, name: str, choice_names: Sequence[str], end: int) -> Ballot:
        stored = _StoredBallot(
            id=len(self._ballots),
            name=name,
            choice_names=tuple(choice_names),
            end=end,
            vote_counts=[0] * len(choice_names),
        )
        self._ballots.append(stored)
        return stored.snapshot()

    def next_ballot_id(self) -> int:
        return len(self._ballots)

    def has_voted(self, voter: str, ballot_id: int) -> bool:
        return (voter, ballot_id) in self._votes

    def record_vote(self, voter: str, ballot_id: int, choice_index: int) -> None:
        self._ballots[ballot_id].vote_counts[choice_index] += 1
        self._votes.add((voter, ballot_id))


__all__ = ["InMemoryVotingState"]
