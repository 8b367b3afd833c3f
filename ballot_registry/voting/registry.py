"""Voter allow-list operations."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from ballot_registry.voting.access import require_admin
from ballot_registry.voting.state import VotingState

logger = logging.getLogger(__name__)


def add_voters(state: VotingState, *, caller: str, identities: Iterable[str]) -> int:
    """Mark every identity in ``identities`` as an eligible voter.

    Admin only (raises :class:`~ballot_registry.voting.errors.Unauthorized`).
    Re-adding an eligible identity is a no-op and an empty list is accepted.
    Returns how many identities became eligible with this call.
    """

    unique = list(dict.fromkeys(identities))
    with state.write():
        require_admin(state, caller)
        added = sum(1 for identity in unique if state.enable_voter(identity))

    logger.info("registered voters", extra={"requested": len(unique), "added": added})
    return added


def is_voter(state: VotingState, identity: str) -> bool:
    with state.read():
        return state.is_voter(identity)


__all__ = ["add_voters", "is_voter"]
