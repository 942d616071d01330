"""Single-day vehicle availability checks."""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import date, datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from chauffeur.core.dates import normalize_day
from chauffeur.models.availability_block import AvailabilityBlock, BlockReason
from chauffeur.models.reservation import ACTIVE_RESERVATION_STATUSES, Reservation
from chauffeur.services import capacity_service

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_DETAILS = "Unavailable due to an administrative block"


@dataclass(slots=True, frozen=True)
class DayAvailability:
    """Whether a vehicle can take another booking on one day."""

    available: bool
    blocked_by: BlockReason | None
    details: str | None
    units_available: int
    units_total: int


async def count_active_reservations(
    session: AsyncSession,
    *,
    vehicle_id: uuid.UUID,
    day: date,
) -> int:
    """Count reservations holding one of the vehicle's units on ``day``."""
    result = await session.execute(
        select(func.count())
        .select_from(Reservation)
        .where(
            Reservation.vehicle_id == vehicle_id,
            Reservation.event_date == day,
            Reservation.status.in_(ACTIVE_RESERVATION_STATUSES),
        )
    )
    return int(result.scalar_one())


async def check_availability(
    session: AsyncSession,
    *,
    vehicle_id: uuid.UUID,
    day: date | datetime,
) -> DayAvailability:
    """Evaluate a vehicle's capacity for a single calendar day.

    An admin block wins over everything else. Without one, the day is full
    once active reservations reach the vehicle's unit count.
    """
    target = normalize_day(day)
    units_total = await capacity_service.get_unit_count(session, vehicle_id)

    blocks = (
        await session.execute(
            select(AvailabilityBlock)
            .where(
                AvailabilityBlock.vehicle_id == vehicle_id,
                AvailabilityBlock.block_date == target,
            )
            .order_by(AvailabilityBlock.created_at.asc())
        )
    ).scalars().all()
    if blocks:
        block = blocks[0]
        return DayAvailability(
            available=False,
            blocked_by=block.reason,
            details=block.details or DEFAULT_BLOCK_DETAILS,
            units_available=0,
            units_total=units_total,
        )

    active = await count_active_reservations(
        session, vehicle_id=vehicle_id, day=target
    )
    if active >= units_total:
        logger.debug(
            "Vehicle %s fully reserved on %s (%s/%s)",
            vehicle_id,
            target,
            active,
            units_total,
        )
        return DayAvailability(
            available=False,
            blocked_by=BlockReason.RESERVED,
            details=f"All units are reserved ({active}/{units_total})",
            units_available=0,
            units_total=units_total,
        )

    return DayAvailability(
        available=True,
        blocked_by=None,
        details=None,
        units_available=units_total - active,
        units_total=units_total,
    )
