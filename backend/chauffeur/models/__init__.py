"""ORM models package export."""

from chauffeur.models.audit_event import AuditEvent
from chauffeur.models.availability_block import AvailabilityBlock, BlockReason
from chauffeur.models.reservation import (
    ACTIVE_RESERVATION_STATUSES,
    Reservation,
    ReservationStatus,
)
from chauffeur.models.service_package import ServicePackage
from chauffeur.models.vehicle import Vehicle, VehicleStatus, VehicleUnit

__all__ = [
    "ACTIVE_RESERVATION_STATUSES",
    "AuditEvent",
    "AvailabilityBlock",
    "BlockReason",
    "Reservation",
    "ReservationStatus",
    "ServicePackage",
    "Vehicle",
    "VehicleStatus",
    "VehicleUnit",
]
