"""Ballot, vote and result endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from ballot_registry.api.deps import get_clock, get_voting_state
from ballot_registry.api.errors import http_error
from ballot_registry.api.routes.auth import get_current_identity
from ballot_registry.schemas import (
    BallotCreate,
    BallotRead,
    ChoiceRead,
    NextBallotIdRead,
    VoteCreate,
    VoteStatusRead,
)
from ballot_registry.voting import (
    Clock,
    VotingError,
    VotingState,
    create_ballot,
    get_ballot,
    has_voted,
    next_ballot_id,
    results,
    vote,
)

router = APIRouter(prefix="/ballots")


@router.post("", response_model=BallotRead, status_code=status.HTTP_201_CREATED)
def create(
    payload: BallotCreate,
    state: VotingState = Depends(get_voting_state),
    clock: Clock = Depends(get_clock),
    caller: str = Depends(get_current_identity),
) -> BallotRead:
    """Create a ballot closing ``duration_seconds`` from now. Admin only."""

    try:
        ballot = create_ballot(
            state,
            caller=caller,
            name=payload.name,
            choices=payload.choices,
            duration_seconds=payload.duration_seconds,
            clock=clock,
        )
    except VotingError as exc:
        raise http_error(exc) from exc
    return BallotRead.model_validate(ballot)


@router.get("/next-id", response_model=NextBallotIdRead)
def read_next_ballot_id(state: VotingState = Depends(get_voting_state)) -> NextBallotIdRead:
    return NextBallotIdRead(next_ballot_id=next_ballot_id(state))


@router.get("/{ballot_id}", response_model=BallotRead)
def read_ballot(ballot_id: int, state: VotingState = Depends(get_voting_state)) -> BallotRead:
    try:
        ballot = get_ballot(state, ballot_id)
    except VotingError as exc:
        raise http_error(exc) from exc
    return BallotRead.model_validate(ballot)


@router.post("/{ballot_id}/votes", status_code=status.HTTP_204_NO_CONTENT)
def cast_vote(
    ballot_id: int,
    payload: VoteCreate,
    state: VotingState = Depends(get_voting_state),
    clock: Clock = Depends(get_clock),
    voter: str = Depends(get_current_identity),
) -> Response:
    """Cast the caller's vote for the choice at ``choice_index``."""

    try:
        vote(state, ballot_id=ballot_id, choice_index=payload.choice_index, voter=voter, clock=clock)
    except VotingError as exc:
        raise http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{ballot_id}/votes/{identity}", response_model=VoteStatusRead)
def read_vote_status(
    ballot_id: int,
    identity: str,
    state: VotingState = Depends(get_voting_state),
) -> VoteStatusRead:
    return VoteStatusRead(
        identity=identity,
        ballot_id=ballot_id,
        has_voted=has_voted(state, identity, ballot_id),
    )


@router.get("/{ballot_id}/results", response_model=list[ChoiceRead])
def read_results(
    ballot_id: int,
    state: VotingState = Depends(get_voting_state),
    clock: Clock = Depends(get_clock),
) -> list[ChoiceRead]:
    """Final tally; only available once the ballot has ended."""

    try:
        choices = results(state, ballot_id, clock=clock)
    except VotingError as exc:
        raise http_error(exc) from exc
    return [ChoiceRead.model_validate(choice) for choice in choices]


__all__ = [
    "cast_vote",
    "create",
    "read_ballot",
    "read_next_ballot_id",
    "read_results",
    "read_vote_status",
    "router",
]
