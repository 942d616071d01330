"""Vehicle availability, block management and calendar endpoints."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from chauffeur.api import deps
from chauffeur.core.config import get_settings
from chauffeur.schemas.availability import (
    AvailabilityBlockCreate,
    AvailabilityBlockRead,
    BlockDeleteResponse,
    DayAvailabilityRead,
    MonthlyCalendarRead,
)
from chauffeur.services import (
    availability_block_service,
    availability_service,
    calendar_service,
    capacity_service,
)
from chauffeur.services.errors import (
    BlockConflictError,
    BlockNotFoundError,
    BlockValidationError,
    VehicleNotFoundError,
)

router = APIRouter(prefix="/vehicle-availability")

_settings = get_settings()
_BLOCK_WRITE_LIMIT = deps.parse_rate(_settings.rate_limit_blocks, fallback=(30, 60))
_DEFAULT_LIMIT = deps.parse_rate(_settings.rate_limit_default, fallback=(100, 60))

YearParam = Annotated[int, Query(ge=1, le=9999, examples=[2026])]
MonthParam = Annotated[int, Query(ge=1, le=12, examples=[3])]


def _not_found(exc: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get(
    "/check",
    response_model=DayAvailabilityRead,
    summary="Check a vehicle's availability on a date",
    dependencies=[deps.rate_limit(_DEFAULT_LIMIT)],
)
async def check_availability(
    vehicle_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    day: Annotated[date, Query(alias="date", examples=["2026-03-10"])],
) -> DayAvailabilityRead:
    try:
        await capacity_service.get_vehicle(session, vehicle_id)
    except VehicleNotFoundError as exc:
        raise _not_found(exc) from exc
    result = await availability_service.check_availability(
        session, vehicle_id=vehicle_id, day=day
    )
    return DayAvailabilityRead.model_validate(result)


@router.get(
    "/calendar",
    response_model=MonthlyCalendarRead,
    summary="Unified monthly calendar for the fleet or a single vehicle",
)
async def get_calendar(
    year: YearParam,
    month: MonthParam,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    vehicle_id: uuid.UUID | None = None,
) -> MonthlyCalendarRead:
    try:
        calendar = await calendar_service.get_unified_calendar(
            session, year=year, month=month, vehicle_id=vehicle_id
        )
    except VehicleNotFoundError as exc:
        raise _not_found(exc) from exc
    return MonthlyCalendarRead.model_validate(calendar)


@router.get(
    "/{vehicle_id}/calendar",
    response_model=MonthlyCalendarRead,
    summary="Monthly calendar for one vehicle",
)
async def get_vehicle_calendar(
    vehicle_id: uuid.UUID,
    year: YearParam,
    month: MonthParam,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> MonthlyCalendarRead:
    try:
        calendar = await calendar_service.get_vehicle_month(
            session, vehicle_id=vehicle_id, year=year, month=month
        )
    except VehicleNotFoundError as exc:
        raise _not_found(exc) from exc
    return MonthlyCalendarRead.model_validate(calendar)


@router.get(
    "/{vehicle_id}/blocks",
    response_model=list[AvailabilityBlockRead],
    summary="List a vehicle's upcoming blocks, or its blocks on one date",
)
async def list_blocks(
    vehicle_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    day: Annotated[date | None, Query(alias="date")] = None,
) -> list[AvailabilityBlockRead]:
    try:
        await capacity_service.get_vehicle(session, vehicle_id)
    except VehicleNotFoundError as exc:
        raise _not_found(exc) from exc
    if day is None:
        blocks = await availability_block_service.list_future_blocks(
            session, vehicle_id=vehicle_id
        )
    else:
        blocks = await availability_block_service.list_blocks_on_day(
            session, vehicle_id=vehicle_id, day=day
        )
    return [AvailabilityBlockRead.model_validate(block) for block in blocks]


@router.post(
    "/block",
    response_model=AvailabilityBlockRead,
    status_code=status.HTTP_201_CREATED,
    summary="Block a vehicle for a future date",
    dependencies=[deps.rate_limit(_BLOCK_WRITE_LIMIT)],
)
async def create_block(
    payload: AvailabilityBlockCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> AvailabilityBlockRead:
    try:
        block = await availability_block_service.create_block(
            session,
            vehicle_id=payload.vehicle_id,
            day=payload.block_date,
            reason=payload.reason,
            details=payload.details,
            created_by=payload.created_by,
        )
    except VehicleNotFoundError as exc:
        raise _not_found(exc) from exc
    except BlockConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except BlockValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return AvailabilityBlockRead.model_validate(block)


@router.delete(
    "/block/{block_id}",
    response_model=BlockDeleteResponse,
    summary="Remove a block",
    dependencies=[deps.rate_limit(_BLOCK_WRITE_LIMIT)],
)
async def delete_block(
    block_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    actor: str | None = Query(default=None, max_length=255),
) -> BlockDeleteResponse:
    try:
        message = await availability_block_service.delete_block(
            session, block_id=block_id, actor=actor
        )
    except BlockNotFoundError as exc:
        raise _not_found(exc) from exc
    return BlockDeleteResponse(message=message)
