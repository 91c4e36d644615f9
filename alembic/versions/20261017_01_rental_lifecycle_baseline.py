"""Rental lifecycle schema baseline

Revision ID: 20261017_01
Revises: None
Create Date: 2026-10-17
"""
# pylint: disable=no-member,invalid-name,wrong-import-order

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "20261017_01"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto")

    op.create_table(
        "rental_application",
        sa.Column("application_id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("property_id", sa.BigInteger(), nullable=False),
        sa.Column("status", sa.Text(), nullable=False),
        sa.Column("created_at_utc", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint(
            "status IN ('PENDING', 'ACCEPTED', 'REJECTED')",
            name="ck_rental_application_status",
        ),
    )
    op.create_index("ix_rental_application_user_id", "rental_application", ["user_id"])
    op.create_index("ix_rental_application_property_id", "rental_application", ["property_id"])
    op.create_index("ix_rental_application_created_at_utc", "rental_application", ["created_at_utc"])

    op.create_table(
        "rental_registry",
        sa.Column("registry_id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column(
            "application_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("rental_application.application_id", name="fk_rental_registry_application"),
            nullable=False,
        ),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("monthly_amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("created_at_utc", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("monthly_amount > 0", name="ck_rental_registry_monthly_amount_positive"),
        sa.CheckConstraint("end_date IS NULL OR start_date <= end_date", name="ck_rental_registry_date_range"),
    )
    op.create_index("ix_rental_registry_application_id", "rental_registry", ["application_id"])
    op.create_index("ix_rental_registry_created_at_utc", "rental_registry", ["created_at_utc"])
    op.create_index(
        "uq_rental_registry_active_application",
        "rental_registry",
        ["application_id"],
        unique=True,
        postgresql_where=sa.text("active"),
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("uq_rental_registry_active_application", table_name="rental_registry")
    op.drop_index("ix_rental_registry_created_at_utc", table_name="rental_registry")
    op.drop_index("ix_rental_registry_application_id", table_name="rental_registry")
    op.drop_table("rental_registry")

    op.drop_index("ix_rental_application_created_at_utc", table_name="rental_application")
    op.drop_index("ix_rental_application_property_id", table_name="rental_application")
    op.drop_index("ix_rental_application_user_id", table_name="rental_application")
    op.drop_table("rental_application")
