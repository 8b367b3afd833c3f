"""Translation of voting errors into HTTP responses."""
from __future__ import annotations

import logging

from fastapi import HTTPException, status

from ballot_registry.obs import record_rejection
from ballot_registry.voting import (
    AlreadyVoted,
    BallotEnded,
    BallotNotEnded,
    InvalidBallot,
    InvalidChoice,
    NotFound,
    NotVoter,
    Unauthorized,
    VotingError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[VotingError], int] = {
    Unauthorized: status.HTTP_403_FORBIDDEN,
    NotVoter: status.HTTP_403_FORBIDDEN,
    AlreadyVoted: status.HTTP_409_CONFLICT,
    BallotEnded: status.HTTP_409_CONFLICT,
    BallotNotEnded: status.HTTP_409_CONFLICT,
    NotFound: status.HTTP_404_NOT_FOUND,
    InvalidChoice: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidBallot: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def http_error(exc: VotingError) -> HTTPException:
    """Return the HTTP exception matching a rejected voting operation."""

    record_rejection(exc.code)
    logger.info("voting operation rejected", extra={"code": exc.code})
    status_code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=status_code, detail=exc.detail)


__all__ = ["http_error"]
