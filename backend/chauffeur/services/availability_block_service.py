"""Create, list and remove manual availability blocks."""
from __future__ import annotations

import logging
import uuid
from datetime import date, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from chauffeur.core import dates
from chauffeur.models.availability_block import AvailabilityBlock, BlockReason
from chauffeur.services import audit_service, capacity_service
from chauffeur.services.errors import (
    BlockConflictError,
    BlockNotFoundError,
    BlockValidationError,
)

logger = logging.getLogger(__name__)

BLOCK_DELETED_MESSAGE = "Block deleted"


async def list_future_blocks(
    session: AsyncSession,
    *,
    vehicle_id: uuid.UUID,
    today: date | None = None,
) -> list[AvailabilityBlock]:
    """Return the vehicle's blocks from today onwards, earliest first."""
    start = today or dates.today()
    result = await session.execute(
        select(AvailabilityBlock)
        .where(
            AvailabilityBlock.vehicle_id == vehicle_id,
            AvailabilityBlock.block_date >= start,
        )
        .order_by(AvailabilityBlock.block_date.asc())
    )
    return list(result.scalars().all())


async def list_blocks_on_day(
    session: AsyncSession,
    *,
    vehicle_id: uuid.UUID,
    day: date | datetime,
) -> list[AvailabilityBlock]:
    """Return the vehicle's blocks for one day, newest first."""
    result = await session.execute(
        select(AvailabilityBlock)
        .where(
            AvailabilityBlock.vehicle_id == vehicle_id,
            AvailabilityBlock.block_date == dates.normalize_day(day),
        )
        .order_by(AvailabilityBlock.created_at.desc())
    )
    return list(result.scalars().all())


async def _find_block_on_day(
    session: AsyncSession, *, vehicle_id: uuid.UUID, day: date
) -> AvailabilityBlock | None:
    result = await session.execute(
        select(AvailabilityBlock)
        .where(
            AvailabilityBlock.vehicle_id == vehicle_id,
            AvailabilityBlock.block_date == day,
        )
        .limit(1)
    )
    return result.scalars().first()


async def create_block(
    session: AsyncSession,
    *,
    vehicle_id: uuid.UUID,
    day: date | datetime,
    reason: BlockReason,
    details: str | None = None,
    created_by: str | None = None,
    today: date | None = None,
) -> AvailabilityBlock:
    """Block a vehicle for a future day.

    All checks run before anything is written. The unique index on
    ``(vehicle_id, block_date)`` turns a concurrent duplicate into a
    ``BlockConflictError`` as well.
    """
    target = dates.normalize_day(day)
    current_day = today or dates.today()
    if target <= current_day:
        logger.info("Rejected block for vehicle %s on non-future day %s", vehicle_id, target)
        raise BlockValidationError("Only future dates can be blocked")

    await capacity_service.get_vehicle(session, vehicle_id)

    if await _find_block_on_day(session, vehicle_id=vehicle_id, day=target) is not None:
        logger.info("Rejected duplicate block for vehicle %s on %s", vehicle_id, target)
        raise BlockConflictError("A block already exists for this vehicle on this date")

    block = AvailabilityBlock(
        vehicle_id=vehicle_id,
        block_date=target,
        reason=reason,
        details=details,
        created_by=created_by,
    )
    session.add(block)
    try:
        await session.flush()
        await audit_service.record_event(
            session,
            event_type="availability.block_created",
            actor=created_by,
            description=f"Vehicle blocked on {dates.day_key(target)}",
            payload={
                "block_id": str(block.id),
                "vehicle_id": str(vehicle_id),
                "date": dates.day_key(target),
                "reason": reason.value,
            },
            commit=False,
        )
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise BlockConflictError(
            "A block already exists for this vehicle on this date"
        ) from exc
    except Exception:
        await session.rollback()
        raise
    await session.refresh(block)

    logger.info(
        "Blocked vehicle %s on %s (%s)", vehicle_id, target, reason.value
    )
    return block


async def get_block(
    session: AsyncSession, *, block_id: uuid.UUID
) -> AvailabilityBlock:
    """Fetch a block or raise ``BlockNotFoundError``."""
    block = await session.get(AvailabilityBlock, block_id)
    if block is None:
        raise BlockNotFoundError("Block not found")
    return block


async def delete_block(
    session: AsyncSession,
    *,
    block_id: uuid.UUID,
    actor: str | None = None,
) -> str:
    """Remove a block and return a confirmation message."""
    block = await get_block(session, block_id=block_id)
    payload = {
        "block_id": str(block.id),
        "vehicle_id": str(block.vehicle_id),
        "date": dates.day_key(block.block_date),
        "reason": block.reason.value,
    }
    await session.delete(block)
    try:
        await audit_service.record_event(
            session,
            event_type="availability.block_deleted",
            actor=actor,
            description=f"Vehicle unblocked on {payload['date']}",
            payload=payload,
            commit=False,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info("Removed block %s for vehicle %s", block_id, payload["vehicle_id"])
    return BLOCK_DELETED_MESSAGE
