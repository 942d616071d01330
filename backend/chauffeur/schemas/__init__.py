"""Schema exports."""

from chauffeur.schemas.availability import (
    AvailabilityBlockCreate,
    AvailabilityBlockRead,
    BlockDeleteResponse,
    CalendarDayRead,
    DayAvailabilityRead,
    DayReservationRead,
    MonthlyCalendarRead,
    VehicleDayRead,
)

__all__ = [
    "AvailabilityBlockCreate",
    "AvailabilityBlockRead",
    "BlockDeleteResponse",
    "CalendarDayRead",
    "DayAvailabilityRead",
    "DayReservationRead",
    "MonthlyCalendarRead",
    "VehicleDayRead",
]
