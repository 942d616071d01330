"""Errors raised by the availability services."""

from __future__ import annotations


class AvailabilityError(ValueError):
    """Base class for fleet availability failures."""


class VehicleNotFoundError(AvailabilityError):
    """The vehicle id does not resolve to a vehicle record."""


class BlockNotFoundError(AvailabilityError):
    """No availability block exists with the given id."""


class BlockValidationError(AvailabilityError):
    """A block request breaks a blocking rule."""


class BlockConflictError(BlockValidationError):
    """A block already exists for the vehicle on that day."""


__all__ = [
    "AvailabilityError",
    "BlockConflictError",
    "BlockNotFoundError",
    "BlockValidationError",
    "VehicleNotFoundError",
]
