"""Manual availability blocks placed on a vehicle by an admin."""

from __future__ import annotations

import enum
import uuid
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

import sqlalchemy as sa
from sqlalchemy import Date, DateTime, Enum, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chauffeur.db.base import Base

if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from chauffeur.models.vehicle import Vehicle


class BlockReason(str, enum.Enum):
    """Why a vehicle was taken out of service for a day."""

    RESERVED = "reserved"
    MAINTENANCE = "maintenance"
    ADMIN_BLOCKED = "admin_blocked"
    OTHER = "other"


class AvailabilityBlock(Base):
    """Marks a vehicle unavailable for one calendar day.

    Rows are immutable: changing a block means deleting and recreating it.
    """

    __tablename__ = "availability_blocks"
    __table_args__ = (
        UniqueConstraint(
            "vehicle_id", "block_date", name="uq_availability_block_vehicle_date"
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    vehicle_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False
    )
    block_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    reason: Mapped[BlockReason] = mapped_column(Enum(BlockReason), nullable=False)
    details: Mapped[str | None] = mapped_column(String(1024))
    created_by: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        server_default=sa.func.now(),
    )

    vehicle: Mapped["Vehicle"] = relationship(
        "Vehicle", back_populates="availability_blocks"
    )
