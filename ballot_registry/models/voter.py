"""Voter eligibility ORM model."""
from __future__ import annotations

from sqlalchemy import Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column

from ballot_registry.models.base import Base, TimestampMixin


class VoterRecord(TimestampMixin, Base):
    """An identity on the allow-list. Rows are only ever inserted."""

    __tablename__ = "voters"

    identity: Mapped[str] = mapped_column(Text, primary_key=True)
    eligible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


__all__ = ["VoterRecord"]
