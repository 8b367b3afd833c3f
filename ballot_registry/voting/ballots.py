"""Ballot creation and lookup."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from ballot_registry.obs.metrics import BALLOTS_CREATED_COUNTER
from ballot_registry.voting.access import require_admin
from ballot_registry.voting.clock import Clock
from ballot_registry.voting.errors import InvalidBallot, NotFound
from ballot_registry.voting.state import Ballot, VotingState

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 255


def create_ballot(
    state: VotingState,
    *,
    caller: str,
    name: str,
    choices: Sequence[str],
    duration_seconds: int,
    clock: Clock,
) -> Ballot:
    """Create a ballot that closes ``duration_seconds`` from now.

    Checks, in order: :class:`Unauthorized` for a non-admin caller, then
    :class:`InvalidBallot` for an empty choice list, a negative duration or a
    ballot or choice name longer than :data:`MAX_NAME_LENGTH`. The
    new ballot takes the next sequential id and keeps the choices in the given
    order, each starting at zero votes.
    """

    choice_names = list(choices)
    with state.write():
        require_admin(state, caller)
        if not choice_names or duration_seconds < 0:
            raise InvalidBallot()
        if any(len(label) > MAX_NAME_LENGTH for label in (name, *choice_names)):
            raise InvalidBallot(f"ballot and choice names are limited to {MAX_NAME_LENGTH} characters")
        ballot = state.append_ballot(name, choice_names, clock.now() + duration_seconds)

    BALLOTS_CREATED_COUNTER.inc()
    logger.info(
        "created ballot",
        extra={"ballot_id": ballot.id, "choices": len(ballot.choices), "end": ballot.end},
    )
    return ballot


def get_ballot(state: VotingState, ballot_id: int) -> Ballot:
    """Return a snapshot of the ballot or raise :class:`NotFound`."""

    with state.read():
        ballot = state.find_ballot(ballot_id)
    if ballot is None:
        raise NotFound()
    return ballot


def next_ballot_id(state: VotingState) -> int:
    with state.read():
        return state.next_ballot_id()


__all__ = ["MAX_NAME_LENGTH", "create_ballot", "get_ballot", "next_ballot_id"]
