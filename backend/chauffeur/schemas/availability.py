"""Schemas for vehicle availability, blocks and calendars."""
from __future__ import annotations

import uuid
from datetime import date, datetime, time

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from chauffeur.models.availability_block import BlockReason
from chauffeur.models.reservation import ReservationStatus
from chauffeur.services.calendar_service import DayColor


class DayAvailabilityRead(BaseModel):
    """Capacity of one vehicle on one day."""

    available: bool
    blocked_by: BlockReason | None = None
    details: str | None = None
    units_available: int
    units_total: int

    model_config = ConfigDict(from_attributes=True)


class AvailabilityBlockCreate(BaseModel):
    """Payload to block a vehicle for a future day."""

    vehicle_id: uuid.UUID
    block_date: date = Field(alias="date")
    reason: BlockReason
    details: str | None = Field(default=None, max_length=1024)
    created_by: str | None = Field(default=None, max_length=255)

    model_config = ConfigDict(populate_by_name=True)


class AvailabilityBlockRead(BaseModel):
    """Serialized availability block."""

    id: uuid.UUID
    vehicle_id: uuid.UUID
    block_date: date = Field(
        validation_alias=AliasChoices("block_date", "date"),
        serialization_alias="date",
    )
    reason: BlockReason
    details: str | None = None
    created_by: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BlockDeleteResponse(BaseModel):
    """Confirmation returned after removing a block."""

    message: str


class VehicleDayRead(BaseModel):
    """Per-vehicle slice of a fleet calendar day."""

    vehicle_id: uuid.UUID
    name: str
    units_total: int
    is_blocked: bool
    reason: BlockReason | None = None
    details: str | None = None
    reservation_count: int
    units_available: int

    model_config = ConfigDict(from_attributes=True)


class DayReservationRead(BaseModel):
    """Reservation listed under a fleet calendar day."""

    id: uuid.UUID
    vehicle_name: str
    package_name: str
    customer_name: str
    status: ReservationStatus
    start_time: time | None = None
    end_time: time | None = None

    model_config = ConfigDict(from_attributes=True)


class CalendarDayRead(BaseModel):
    """One day of a monthly availability calendar."""

    day: date = Field(
        validation_alias=AliasChoices("day", "date"),
        serialization_alias="date",
    )
    color: DayColor
    status_label: str
    is_blocked: bool
    reason: BlockReason | None = None
    details: str | None = None
    reservation_count: int
    units_available: int
    units_total: int
    blocked_units: int = 0
    vehicles: list[VehicleDayRead] | None = None
    reservations: list[DayReservationRead] | None = None

    model_config = ConfigDict(from_attributes=True)


class MonthlyCalendarRead(BaseModel):
    """Monthly calendar for a vehicle or for the whole fleet."""

    vehicle_id: uuid.UUID | None = None
    year: int
    month: int
    total_units: int
    total_vehicles: int | None = None
    days: list[CalendarDayRead]

    model_config = ConfigDict(from_attributes=True)
