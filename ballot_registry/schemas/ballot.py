"""Schemas for ballot, vote and result endpoints."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BallotCreate(BaseModel):
    """Payload for defining a new ballot."""

    # Lengths, emptiness and sign are checked after authorization, not here.
    name: str
    choices: list[str] = Field(..., description="Choice names in display order")
    duration_seconds: int = Field(..., description="Seconds from now until voting closes")


class ChoiceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    vote_count: int


class BallotRead(BaseModel):
    """Serialized ballot; ``end`` is an epoch timestamp in seconds."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    end: int
    choices: list[ChoiceRead]


class NextBallotIdRead(BaseModel):
    next_ballot_id: int


class VoteCreate(BaseModel):
    choice_index: int


class VoteStatusRead(BaseModel):
    identity: str
    ballot_id: int
    has_voted: bool


__all__ = [
    "BallotCreate",
    "BallotRead",
    "ChoiceRead",
    "NextBallotIdRead",
    "VoteCreate",
    "VoteStatusRead",
]
