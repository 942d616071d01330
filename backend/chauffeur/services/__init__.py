"""Service layer exports."""
from chauffeur.services import (
    audit_service,
    availability_block_service,
    availability_service,
    calendar_service,
    capacity_service,
)

__all__ = [
    "audit_service",
    "availability_block_service",
    "availability_service",
    "calendar_service",
    "capacity_service",
]
