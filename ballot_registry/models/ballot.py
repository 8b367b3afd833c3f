"""Ballot, choice and vote record ORM models."""
from __future__ import annotations

from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ballot_registry.models.base import Base, TimestampMixin


class BallotRecord(TimestampMixin, Base):
    """A ballot; ``id`` is assigned from the registry counter, not the database."""

    __tablename__ = "ballots"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    end_time: Mapped[int] = mapped_column(BigInteger, nullable=False)

    choices = relationship(
        "ChoiceRecord",
        back_populates="ballot",
        order_by="ChoiceRecord.position",
        cascade="all, delete-orphan",
    )
    votes = relationship("VoteRecord", back_populates="ballot")


class ChoiceRecord(Base):
    """A choice within a ballot; ``position`` is the choice id."""

    __tablename__ = "choices"
    __table_args__ = (CheckConstraint("vote_count >= 0", name="ck_choices_vote_count"),)

    ballot_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("ballots.id", ondelete="CASCADE"), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    vote_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    ballot = relationship("BallotRecord", back_populates="choices")


class VoteRecord(TimestampMixin, Base):
    """The fact that ``voter`` has voted on ``ballot_id``; at most one per pair."""

    __tablename__ = "vote_records"
    __table_args__ = (Index("ix_vote_records_ballot_id", "ballot_id"),)

    voter: Mapped[str] = mapped_column(
        Text, ForeignKey("voters.identity", ondelete="CASCADE"), primary_key=True
    )
    ballot_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("ballots.id", ondelete="CASCADE"), primary_key=True
    )

    ballot = relationship("BallotRecord", back_populates="votes")


__all__ = ["BallotRecord", "ChoiceRecord", "VoteRecord"]
