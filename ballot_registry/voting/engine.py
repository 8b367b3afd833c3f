"""Vote casting."""
from __future__ import annotations

import logging

from ballot_registry.obs.metrics import VOTES_CAST_COUNTER
from ballot_registry.voting.clock import Clock
from ballot_registry.voting.errors import (
    AlreadyVoted,
    BallotEnded,
    InvalidChoice,
    NotFound,
    NotVoter,
)
from ballot_registry.voting.state import VotingState

logger = logging.getLogger(__name__)


def vote(state: VotingState, *, ballot_id: int, choice_index: int, voter: str, clock: Clock) -> None:
    """Cast ``voter``'s single vote on a ballot.

    Checks run in this order and the first failure wins:

    1. :class:`NotFound` - the ballot does not exist.
    2. :class:`BallotEnded` - the clock has reached the ballot end time.
    3. :class:`NotVoter` - ``voter`` is not on the allow-list.
    4. :class:`AlreadyVoted` - ``voter`` already voted on this ballot.
    5. :class:`InvalidChoice` - ``choice_index`` is out of range.

    On success the vote record is set and exactly one choice count goes up.
    """

    with state.write():
        ballot = state.find_ballot(ballot_id)
        if ballot is None:
            raise NotFound()
        if clock.now() >= ballot.end:
            raise BallotEnded()
        if not state.is_voter(voter):
            raise NotVoter()
        if state.has_voted(voter, ballot_id):
            raise AlreadyVoted()
        if not 0 <= choice_index < len(ballot.choices):
            raise InvalidChoice()
        state.record_vote(voter, ballot_id, choice_index)

    VOTES_CAST_COUNTER.inc()
    logger.info("vote recorded", extra={"ballot_id": ballot_id})


def has_voted(state: VotingState, voter: str, ballot_id: int) -> bool:
    with state.read():
        return state.has_voted(voter, ballot_id)


__all__ = ["has_voted", "vote"]
