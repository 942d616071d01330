"""Fleet vehicles and their interchangeable unit counts."""

from __future__ import annotations

import enum
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chauffeur.db.base import Base
from chauffeur.models.mixins import TimestampMixin

if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from chauffeur.models.availability_block import AvailabilityBlock
    from chauffeur.models.reservation import Reservation


class VehicleStatus(str, enum.Enum):
    """Whether a vehicle listing is offered to customers."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class Vehicle(TimestampMixin, Base):
    """A vehicle listing; may stand for several identical cars."""

    __tablename__ = "vehicles"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[VehicleStatus] = mapped_column(
        Enum(VehicleStatus), default=VehicleStatus.ACTIVE, nullable=False
    )

    unit: Mapped["VehicleUnit | None"] = relationship(
        "VehicleUnit",
        back_populates="vehicle",
        uselist=False,
        cascade="all, delete-orphan",
    )
    availability_blocks: Mapped[list["AvailabilityBlock"]] = relationship(
        "AvailabilityBlock",
        back_populates="vehicle",
        cascade="all, delete-orphan",
    )
    reservations: Mapped[list["Reservation"]] = relationship(
        "Reservation", back_populates="vehicle"
    )


class VehicleUnit(TimestampMixin, Base):
    """Number of physical cars behind a vehicle listing."""

    __tablename__ = "vehicle_units"
    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_vehicle_units_quantity_positive"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    vehicle_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    quantity: Mapped[int] = mapped_column(Integer(), nullable=False, default=1)

    vehicle: Mapped["Vehicle"] = relationship("Vehicle", back_populates="unit")
