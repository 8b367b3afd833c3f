"""Pydantic schemas package."""

from .ballot import (
    BallotCreate,
    BallotRead,
    ChoiceRead,
    NextBallotIdRead,
    VoteCreate,
    VoteStatusRead,
)
from .voter import VoterRead, VoterRegistration

__all__ = [
    "BallotCreate",
    "BallotRead",
    "ChoiceRead",
    "NextBallotIdRead",
    "VoteCreate",
    "VoteStatusRead",
    "VoterRead",
    "VoterRegistration",
]
