"""Monthly availability calendars for one vehicle or the whole fleet.

Both views load the month's blocks and active reservations once, index them
by day key and then walk the days in memory; the query count does not depend
on the length of the month.
"""
from __future__ import annotations

import enum
import uuid
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, time

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from chauffeur.core.config import get_settings
from chauffeur.core.dates import day_key, iter_days, month_bounds
from chauffeur.models.availability_block import AvailabilityBlock, BlockReason
from chauffeur.models.reservation import (
    ACTIVE_RESERVATION_STATUSES,
    Reservation,
    ReservationStatus,
)
from chauffeur.models.vehicle import Vehicle, VehicleStatus
from chauffeur.services import capacity_service

MISSING_LABEL = "N/A"


class DayColor(str, enum.Enum):
    """Occupancy signal shown on a calendar day."""

    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"
    GREEN = "green"


STATUS_BLOCKED = "Blocked"
STATUS_NO_AVAILABILITY = "No availability"
STATUS_HIGH_OCCUPANCY = "High occupancy"
STATUS_PARTIAL_OCCUPANCY = "Partial occupancy"
STATUS_AVAILABLE = "Available"


@dataclass(slots=True, frozen=True)
class VehicleDayBreakdown:
    """One vehicle's share of a fleet-wide day."""

    vehicle_id: uuid.UUID
    name: str
    units_total: int
    is_blocked: bool
    reason: BlockReason | None
    details: str | None
    reservation_count: int
    units_available: int


@dataclass(slots=True, frozen=True)
class DayReservation:
    """Row of the day's reservation listing."""

    id: uuid.UUID
    vehicle_name: str
    package_name: str
    customer_name: str
    status: ReservationStatus
    start_time: time | None
    end_time: time | None


@dataclass(slots=True, frozen=True)
class CalendarDay:
    """Aggregated occupancy for one calendar day."""

    day: date
    color: DayColor
    status_label: str
    is_blocked: bool
    reason: BlockReason | None
    details: str | None
    reservation_count: int
    units_available: int
    units_total: int
    blocked_units: int = 0
    vehicles: tuple[VehicleDayBreakdown, ...] | None = None
    reservations: tuple[DayReservation, ...] | None = None


@dataclass(slots=True, frozen=True)
class MonthlyCalendar:
    """Day-by-day calendar for a month."""

    vehicle_id: uuid.UUID | None
    year: int
    month: int
    total_units: int
    days: tuple[CalendarDay, ...]
    total_vehicles: int | None = None


def classify_day(
    *,
    units_total: int,
    units_available: int,
    reservation_count: int,
    blocked: bool,
    high_occupancy_ratio: float | None = None,
) -> tuple[DayColor, str]:
    """Map a day's capacity figures onto exactly one color and its label.

    Rules are checked in order and the first match wins: red when blocked or
    nothing is left, yellow when at most the high-occupancy share of units
    remains, blue when anything is booked, green otherwise.
    """
    if high_occupancy_ratio is None:
        high_occupancy_ratio = get_settings().high_occupancy_ratio
    if blocked or units_available == 0:
        return DayColor.RED, STATUS_BLOCKED if blocked else STATUS_NO_AVAILABILITY
    if units_available <= units_total * high_occupancy_ratio:
        return DayColor.YELLOW, STATUS_HIGH_OCCUPANCY
    if reservation_count > 0:
        return DayColor.BLUE, STATUS_PARTIAL_OCCUPANCY
    return DayColor.GREEN, STATUS_AVAILABLE


def vehicle_units_available(
    *, units_total: int, blocked: bool, reservation_count: int
) -> int:
    """Units of one vehicle still bookable on a day."""
    if blocked:
        return 0
    return max(0, units_total - reservation_count)


def build_vehicle_days(
    *,
    first: date,
    last: date,
    units_total: int,
    blocks_by_day: dict[str, AvailabilityBlock],
    reservations_by_day: Counter[str],
) -> list[CalendarDay]:
    """Compute every day of a range for one vehicle from indexed month data."""
    days: list[CalendarDay] = []
    for current in iter_days(first, last):
        key = day_key(current)
        block = blocks_by_day.get(key)
        reservation_count = reservations_by_day[key]
        units_available = vehicle_units_available(
            units_total=units_total,
            blocked=block is not None,
            reservation_count=reservation_count,
        )
        color, label = classify_day(
            units_total=units_total,
            units_available=units_available,
            reservation_count=reservation_count,
            blocked=block is not None,
        )
        days.append(
            CalendarDay(
                day=current,
                color=color,
                status_label=label,
                is_blocked=block is not None,
                reason=block.reason if block else None,
                details=block.details if block else None,
                reservation_count=reservation_count,
                units_available=units_available,
                units_total=units_total,
                blocked_units=units_total if block else 0,
            )
        )
    return days


async def _load_blocks(
    session: AsyncSession,
    *,
    first: date,
    last: date,
    vehicle_id: uuid.UUID | None = None,
) -> Sequence[AvailabilityBlock]:
    stmt: Select[tuple[AvailabilityBlock]] = select(AvailabilityBlock).where(
        AvailabilityBlock.block_date >= first,
        AvailabilityBlock.block_date <= last,
    )
    if vehicle_id is not None:
        stmt = stmt.where(AvailabilityBlock.vehicle_id == vehicle_id)
    result = await session.execute(stmt.order_by(AvailabilityBlock.created_at.asc()))
    return result.scalars().all()


async def _load_active_reservations(
    session: AsyncSession,
    *,
    first: date,
    last: date,
    vehicle_id: uuid.UUID | None = None,
    with_labels: bool = False,
) -> Sequence[Reservation]:
    stmt: Select[tuple[Reservation]] = select(Reservation).where(
        Reservation.event_date >= first,
        Reservation.event_date <= last,
        Reservation.status.in_(ACTIVE_RESERVATION_STATUSES),
    )
    if vehicle_id is not None:
        stmt = stmt.where(Reservation.vehicle_id == vehicle_id)
    if with_labels:
        stmt = stmt.options(
            selectinload(Reservation.vehicle),
            selectinload(Reservation.package),
        )
    result = await session.execute(
        stmt.order_by(Reservation.event_date.asc(), Reservation.start_time.asc())
    )
    return result.scalars().unique().all()


def _index_blocks(blocks: Iterable[AvailabilityBlock]) -> dict[str, AvailabilityBlock]:
    indexed: dict[str, AvailabilityBlock] = {}
    for block in blocks:
        indexed.setdefault(day_key(block.block_date), block)
    return indexed


async def get_vehicle_month(
    session: AsyncSession,
    *,
    vehicle_id: uuid.UUID,
    year: int,
    month: int,
) -> MonthlyCalendar:
    """Build the monthly calendar of a single vehicle."""
    await capacity_service.get_vehicle(session, vehicle_id)
    first, last = month_bounds(year, month)
    units_total = await capacity_service.get_unit_count(session, vehicle_id)
    blocks = await _load_blocks(session, first=first, last=last, vehicle_id=vehicle_id)
    reservations = await _load_active_reservations(
        session, first=first, last=last, vehicle_id=vehicle_id
    )

    days = build_vehicle_days(
        first=first,
        last=last,
        units_total=units_total,
        blocks_by_day=_index_blocks(blocks),
        reservations_by_day=Counter(day_key(r.event_date) for r in reservations),
    )
    return MonthlyCalendar(
        vehicle_id=vehicle_id,
        year=year,
        month=month,
        total_units=units_total,
        days=tuple(days),
    )


def _day_reservation(reservation: Reservation) -> DayReservation:
    return DayReservation(
        id=reservation.id,
        vehicle_name=reservation.vehicle.name if reservation.vehicle else MISSING_LABEL,
        package_name=reservation.package.name if reservation.package else MISSING_LABEL,
        customer_name=reservation.customer_name,
        status=reservation.status,
        start_time=reservation.start_time,
        end_time=reservation.end_time,
    )


async def get_unified_calendar(
    session: AsyncSession,
    *,
    year: int,
    month: int,
    vehicle_id: uuid.UUID | None = None,
) -> MonthlyCalendar:
    """Return the fleet-wide calendar, or one vehicle's when ``vehicle_id`` is set."""
    if vehicle_id is not None:
        return await get_vehicle_month(
            session, vehicle_id=vehicle_id, year=year, month=month
        )

    first, last = month_bounds(year, month)
    vehicles = (
        await session.execute(
            select(Vehicle)
            .options(selectinload(Vehicle.unit))
            .where(Vehicle.status == VehicleStatus.ACTIVE)
            .order_by(Vehicle.name.asc())
        )
    ).scalars().all()
    blocks = await _load_blocks(session, first=first, last=last)
    reservations = await _load_active_reservations(
        session, first=first, last=last, with_labels=True
    )

    units_by_vehicle = {
        vehicle.id: capacity_service.unit_count(vehicle.unit) for vehicle in vehicles
    }
    blocks_by_vehicle_day: dict[tuple[uuid.UUID, str], AvailabilityBlock] = {}
    for block in blocks:
        blocks_by_vehicle_day.setdefault(
            (block.vehicle_id, day_key(block.block_date)), block
        )
    counts_by_vehicle_day: Counter[tuple[uuid.UUID | None, str]] = Counter(
        (r.vehicle_id, day_key(r.event_date)) for r in reservations
    )
    reservations_by_day: dict[str, list[DayReservation]] = {}
    for reservation in reservations:
        reservations_by_day.setdefault(day_key(reservation.event_date), []).append(
            _day_reservation(reservation)
        )

    days: list[CalendarDay] = []
    for current in iter_days(first, last):
        key = day_key(current)
        total_units = 0
        total_blocked_units = 0
        total_reservations = 0
        breakdown: list[VehicleDayBreakdown] = []
        for vehicle in vehicles:
            units_total = units_by_vehicle[vehicle.id]
            block = blocks_by_vehicle_day.get((vehicle.id, key))
            reservation_count = counts_by_vehicle_day[(vehicle.id, key)]
            total_units += units_total
            if block is not None:
                total_blocked_units += units_total
            total_reservations += reservation_count
            breakdown.append(
                VehicleDayBreakdown(
                    vehicle_id=vehicle.id,
                    name=vehicle.name,
                    units_total=units_total,
                    is_blocked=block is not None,
                    reason=block.reason if block else None,
                    details=block.details if block else None,
                    reservation_count=reservation_count,
                    units_available=vehicle_units_available(
                        units_total=units_total,
                        blocked=block is not None,
                        reservation_count=reservation_count,
                    ),
                )
            )

        units_available = max(
            0, total_units - total_blocked_units - total_reservations
        )
        color, label = classify_day(
            units_total=total_units,
            units_available=units_available,
            reservation_count=total_reservations,
            blocked=total_blocked_units > 0,
        )
        days.append(
            CalendarDay(
                day=current,
                color=color,
                status_label=label,
                is_blocked=total_blocked_units > 0,
                reason=None,
                details=None,
                reservation_count=total_reservations,
                units_available=units_available,
                units_total=total_units,
                blocked_units=total_blocked_units,
                vehicles=tuple(breakdown),
                reservations=tuple(reservations_by_day.get(key, ())),
            )
        )

    return MonthlyCalendar(
        vehicle_id=None,
        year=year,
        month=month,
        total_units=sum(units_by_vehicle.values()),
        days=tuple(days),
        total_vehicles=len(vehicles),
    )
