"""Voter registration endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from ballot_registry.api.deps import get_voting_state
from ballot_registry.api.errors import http_error
from ballot_registry.api.routes.auth import get_current_identity
from ballot_registry.schemas import VoterRead, VoterRegistration
from ballot_registry.voting import VotingError, VotingState, add_voters, is_voter

router = APIRouter(prefix="/voters")


@router.post("", status_code=status.HTTP_204_NO_CONTENT)
def register_voters(
    payload: VoterRegistration,
    state: VotingState = Depends(get_voting_state),
    caller: str = Depends(get_current_identity),
) -> Response:
    """Add identities to the allow-list. Admin only."""

    try:
        add_voters(state, caller=caller, identities=payload.identities)
    except VotingError as exc:
        raise http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{identity}", response_model=VoterRead)
def read_voter(identity: str, state: VotingState = Depends(get_voting_state)) -> VoterRead:
    return VoterRead(identity=identity, is_voter=is_voter(state, identity))


__all__ = ["read_voter", "register_voters", "router"]
