"""Typed failures raised by voting operations.

Each error carries a stable ``code`` used by the HTTP layer and metrics, and a
canonical message. A raised error always means the operation changed nothing.
"""
from __future__ import annotations


class VotingError(RuntimeError):
    """Base exception for ballot registry operations."""

    code = "voting_error"
    message = "voting operation rejected"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    @property
    def detail(self) -> dict[str, str]:
        return {"code": self.code, "message": str(self)}


class Unauthorized(VotingError):
    """Raised when a non-admin attempts an admin-only write."""

    code = "unauthorized"
    message = "only admin"


class NotVoter(VotingError):
    """Raised when an ineligible identity attempts to vote."""

    code = "not_voter"
    message = "only voters can vote"


class AlreadyVoted(VotingError):
    """Raised on a second vote by the same voter on the same ballot."""

    code = "already_voted"
    message = "voter can only vote once for a ballot"


class BallotEnded(VotingError):
    """Raised when a vote arrives at or after the ballot end time."""

    code = "ballot_ended"
    message = "can only vote until ballot end date"


class BallotNotEnded(VotingError):
    """Raised when results are requested before the ballot end time."""

    code = "ballot_not_ended"
    message = "cannot see the ballot result before ballot end"


class NotFound(VotingError):
    """Raised when a ballot identifier does not exist."""

    code = "not_found"
    message = "ballot not found"


class InvalidChoice(VotingError):
    """Raised when a choice index is outside the ballot's choice list."""

    code = "invalid_choice"
    message = "choice index out of range"


class InvalidBallot(VotingError):
    """Raised when a ballot definition has no choices, a negative duration or an overlong name."""

    code = "invalid_ballot"
    message = "ballot needs at least one choice and a non-negative duration"


__all__ = [
    "AlreadyVoted",
    "BallotEnded",
    "BallotNotEnded",
    "InvalidBallot",
    "InvalidChoice",
    "NotFound",
    "NotVoter",
    "Unauthorized",
    "VotingError",
]
