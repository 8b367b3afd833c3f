"""Registry, voter, ballot, choice and vote record tables."""
from __future__ import annotations

from collections.abc import Iterable

import sqlalchemy as sa
from alembic import op

revision = "20261019_01"
down_revision = None
branch_labels = None
depends_on: Iterable[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:  # noqa: D401
    """Create the ballot registry tables."""

    op.create_table(
        "registry",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("admin_identity", sa.Text(), nullable=False),
        sa.Column("next_ballot_id", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_registry"),
        sa.CheckConstraint("id = 1", name="ck_registry_single_row"),
        sa.CheckConstraint("next_ballot_id >= 0", name="ck_registry_next_ballot_id"),
    )

    op.create_table(
        "voters",
        sa.Column("identity", sa.Text(), nullable=False),
        sa.Column("eligible", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("identity", name="pk_voters"),
    )

    op.create_table(
        "ballots",
        sa.Column("id", sa.Integer(), nullable=False, autoincrement=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("end_time", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_ballots"),
    )

    op.create_table(
        "choices",
        sa.Column("ballot_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, autoincrement=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("vote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("ballot_id", "position", name="pk_choices"),
        sa.ForeignKeyConstraint(
            ["ballot_id"], ["ballots.id"], name="fk_choices_ballot_id_ballots", ondelete="CASCADE"
        ),
        sa.CheckConstraint("vote_count >= 0", name="ck_choices_vote_count"),
    )

    op.create_table(
        "vote_records",
        sa.Column("voter", sa.Text(), nullable=False),
        sa.Column("ballot_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("voter", "ballot_id", name="pk_vote_records"),
        sa.ForeignKeyConstraint(
            ["voter"], ["voters.identity"], name="fk_vote_records_voter_voters", ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["ballot_id"], ["ballots.id"], name="fk_vote_records_ballot_id_ballots", ondelete="CASCADE"
        ),
    )
    op.create_index("ix_vote_records_ballot_id", "vote_records", ["ballot_id"])


def downgrade() -> None:  # noqa: D401
    """Drop the ballot registry tables."""

    op.drop_index("ix_vote_records_ballot_id", table_name="vote_records")
    op.drop_table("vote_records")
    op.drop_table("choices")
    op.drop_table("ballots")
    op.drop_table("voters")
    op.drop_table("registry")
