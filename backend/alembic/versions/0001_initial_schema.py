"""Initial fleet availability schema.

Revision ID: 0001
Revises:
Create Date: 2026-02-02
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "vehicles",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "status",
            sa.Enum("ACTIVE", "INACTIVE", name="vehiclestatus"),
            nullable=False,
        ),
        *_timestamps(),
    )

    op.create_table(
        "vehicle_units",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "vehicle_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("vehicles.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("quantity", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("quantity >= 1", name="ck_vehicle_units_quantity_positive"),
    )

    op.create_table(
        "service_packages",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(length=1024)),
        sa.Column("active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "reservations",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "vehicle_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("vehicles.id", ondelete="SET NULL"),
        ),
        sa.Column(
            "package_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("service_packages.id", ondelete="SET NULL"),
        ),
        sa.Column("customer_name", sa.String(length=255), nullable=False),
        sa.Column(
            "status",
            sa.Enum(
                "PENDING_PAYMENT",
                "PARTIAL_PAYMENT",
                "CONFIRMED",
                "COMPLETED",
                "CANCELLED",
                name="reservationstatus",
            ),
            nullable=False,
        ),
        sa.Column("event_date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.Time()),
        sa.Column("end_time", sa.Time()),
        *_timestamps(),
    )
    op.create_index("ix_reservations_vehicle_id", "reservations", ["vehicle_id"])
    op.create_index("ix_reservations_event_date", "reservations", ["event_date"])

    op.create_table(
        "availability_blocks",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "vehicle_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("vehicles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("block_date", sa.Date(), nullable=False),
        sa.Column(
            "reason",
            sa.Enum(
                "RESERVED",
                "MAINTENANCE",
                "ADMIN_BLOCKED",
                "OTHER",
                name="blockreason",
            ),
            nullable=False,
        ),
        sa.Column("details", sa.String(length=1024)),
        sa.Column("created_by", sa.String(length=255)),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.UniqueConstraint(
            "vehicle_id", "block_date", name="uq_availability_block_vehicle_date"
        ),
    )
    op.create_index(
        "ix_availability_blocks_block_date", "availability_blocks", ["block_date"]
    )

    op.create_table(
        "audit_events",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("event_type", sa.String(length=120), nullable=False),
        sa.Column("actor", sa.String(length=255)),
        sa.Column("description", sa.String(length=1024)),
        sa.Column("payload", sa.JSON()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )


def downgrade() -> None:
    op.drop_table("audit_events")
    op.drop_index("ix_availability_blocks_block_date", table_name="availability_blocks")
    op.drop_table("availability_blocks")
    op.drop_index("ix_reservations_event_date", table_name="reservations")
    op.drop_index("ix_reservations_vehicle_id", table_name="reservations")
    op.drop_table("reservations")
    op.drop_table("service_packages")
    op.drop_table("vehicle_units")
    op.drop_table("vehicles")
    sa.Enum(name="blockreason").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="reservationstatus").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="vehiclestatus").drop(op.get_bind(), checkfirst=True)
