"""Post-deadline tallies."""
from __future__ import annotations

from ballot_registry.voting.ballots import get_ballot
from ballot_registry.voting.clock import Clock
from ballot_registry.voting.errors import BallotNotEnded
from ballot_registry.voting.state import Choice, VotingState


def results(state: VotingState, ballot_id: int, *, clock: Clock) -> tuple[Choice, ...]:
    """Return the ballot's choices and final counts in their original order.

    Raises :class:`NotFound` for an unknown ballot and :class:`BallotNotEnded`
    while the clock is still before the ballot end time.
    """

    ballot = get_ballot(state, ballot_id)
    if clock.now() < ballot.end:
        raise BallotNotEnded()
    return ballot.choices


__all__ = ["results"]
