"""Vehicle capacity lookups."""
from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chauffeur.models.vehicle import Vehicle, VehicleUnit
from chauffeur.services.errors import VehicleNotFoundError

# A vehicle without a unit record is a single car.
DEFAULT_UNIT_QUANTITY = 1


def unit_count(unit: VehicleUnit | None) -> int:
    """Return the number of cars a unit record stands for."""
    if unit is None:
        return DEFAULT_UNIT_QUANTITY
    return unit.quantity


async def get_unit_count(session: AsyncSession, vehicle_id: uuid.UUID) -> int:
    """Return how many interchangeable cars the vehicle listing represents."""
    result = await session.execute(
        select(VehicleUnit).where(VehicleUnit.vehicle_id == vehicle_id)
    )
    return unit_count(result.scalar_one_or_none())


async def get_vehicle(session: AsyncSession, vehicle_id: uuid.UUID) -> Vehicle:
    """Fetch a vehicle or raise ``VehicleNotFoundError``."""
    vehicle = await session.get(Vehicle, vehicle_id)
    if vehicle is None:
        raise VehicleNotFoundError("Vehicle not found")
    return vehicle
