"""ORM models package."""
from .ballot import BallotRecord, ChoiceRecord, VoteRecord
from .base import Base, TimestampMixin
from .registry import REGISTRY_ROW_ID, RegistryRecord
from .voter import VoterRecord

__all__ = [
    "Base",
    "BallotRecord",
    "ChoiceRecord",
    "REGISTRY_ROW_ID",
    "RegistryRecord",
    "TimestampMixin",
    "VoteRecord",
    "VoterRecord",
]
