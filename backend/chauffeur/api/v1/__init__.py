"""Versioned API router."""

from fastapi import APIRouter

from . import health, vehicle_availability

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(vehicle_availability.router, tags=["vehicle-availability"])

__all__ = ["router"]
