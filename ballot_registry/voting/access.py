"""Admin authorization checks."""
from __future__ import annotations

from ballot_registry.voting.errors import Unauthorized
from ballot_registry.voting.state import VotingState


def is_admin(state: VotingState, identity: str) -> bool:
    return identity == state.admin


def require_admin(state: VotingState, caller: str) -> None:
    """Raise :class:`Unauthorized` unless ``caller`` is the admin.

    Must run before any other validation of an admin-only write.
    """

    if not is_admin(state, caller):
        raise Unauthorized()


__all__ = ["is_admin", "require_admin"]
