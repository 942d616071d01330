"""Seed a demo fleet with unit counts and service packages."""
from __future__ import annotations

import asyncio

from sqlalchemy import select

from chauffeur.db.session import get_sessionmaker
from chauffeur.models import ServicePackage, Vehicle, VehicleStatus, VehicleUnit

DEMO_VEHICLES: dict[str, int] = {
    "Mercedes-Benz S-Class": 3,
    "Cadillac Escalade ESV": 2,
    "Rolls-Royce Ghost": 1,
    "Mercedes-Benz Sprinter Jet": 1,
}

DEMO_PACKAGES: tuple[str, ...] = (
    "Airport Transfer",
    "Wedding Day",
    "City Night Tour",
)


async def seed_fleet() -> None:
    sessionmaker = get_sessionmaker()
    async with sessionmaker() as session:
        existing_vehicles = set(
            (await session.execute(select(Vehicle.name))).scalars().all()
        )
        existing_packages = set(
            (await session.execute(select(ServicePackage.name))).scalars().all()
        )
        created = 0
        for name, quantity in DEMO_VEHICLES.items():
            if name in existing_vehicles:
                continue
            vehicle = Vehicle(name=name, status=VehicleStatus.ACTIVE)
            if quantity != 1:
                vehicle.unit = VehicleUnit(quantity=quantity)
            session.add(vehicle)
            created += 1
        for name in DEMO_PACKAGES:
            if name not in existing_packages:
                session.add(ServicePackage(name=name, active=True))
                created += 1
        if created:
            await session.commit()
        print(f"Seeded {created} fleet record(s).")


def main() -> None:
    asyncio.run(seed_fleet())


if __name__ == "__main__":
    main()
