"""Reservation models."""
from __future__ import annotations

import enum
import uuid
from datetime import date, time
from typing import TYPE_CHECKING

from sqlalchemy import Date, Enum, ForeignKey, String, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chauffeur.db.base import Base
from chauffeur.models.mixins import TimestampMixin

if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from chauffeur.models.service_package import ServicePackage
    from chauffeur.models.vehicle import Vehicle


class ReservationStatus(str, enum.Enum):
    """Lifecycle states for reservations."""

    PENDING_PAYMENT = "pending_payment"
    PARTIAL_PAYMENT = "partial_payment"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# Statuses that hold a vehicle unit for the event day.
ACTIVE_RESERVATION_STATUSES: frozenset[ReservationStatus] = frozenset(
    {
        ReservationStatus.PENDING_PAYMENT,
        ReservationStatus.PARTIAL_PAYMENT,
        ReservationStatus.CONFIRMED,
        ReservationStatus.COMPLETED,
    }
)


class Reservation(TimestampMixin, Base):
    """A customer's booking of a vehicle for an event day."""

    __tablename__ = "reservations"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    vehicle_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("vehicles.id", ondelete="SET NULL"), index=True
    )
    package_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("service_packages.id", ondelete="SET NULL")
    )
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[ReservationStatus] = mapped_column(
        Enum(ReservationStatus),
        default=ReservationStatus.PENDING_PAYMENT,
        nullable=False,
    )
    event_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    start_time: Mapped[time | None] = mapped_column(Time())
    end_time: Mapped[time | None] = mapped_column(Time())

    vehicle: Mapped["Vehicle | None"] = relationship(
        "Vehicle", back_populates="reservations"
    )
    package: Mapped["ServicePackage | None"] = relationship("ServicePackage")
