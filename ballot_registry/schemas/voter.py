"""Schemas for voter registration endpoints."""
from __future__ import annotations

from pydantic import BaseModel, Field


class VoterRegistration(BaseModel):
    identities: list[str] = Field(default_factory=list)


class VoterRead(BaseModel):
    identity: str
    is_voter: bool


__all__ = ["VoterRead", "VoterRegistration"]
