"""Registry row holding the admin identity and the ballot id counter."""
from __future__ import annotations

from sqlalchemy import CheckConstraint, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from ballot_registry.models.base import Base, TimestampMixin

REGISTRY_ROW_ID = 1


class RegistryRecord(TimestampMixin, Base):
    """Single-row table; the admin is written once and never updated."""

    __tablename__ = "registry"
    __table_args__ = (
        CheckConstraint("id = 1", name="ck_registry_single_row"),
        CheckConstraint("next_ballot_id >= 0", name="ck_registry_next_ballot_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=REGISTRY_ROW_ID)
    admin_identity: Mapped[str] = mapped_column(Text, nullable=False)
    next_ballot_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


__all__ = ["REGISTRY_ROW_ID", "RegistryRecord"]
