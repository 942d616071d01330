"""Common API dependencies."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends, Request, Response
from fastapi_limiter import FastAPILimiter
from fastapi_limiter.depends import RateLimiter
from sqlalchemy.ext.asyncio import AsyncSession

from chauffeur.db.session import get_session

_SECONDS_PER_WINDOW = {
    "second": 1,
    "seconds": 1,
    "minute": 60,
    "minutes": 60,
    "hour": 3600,
    "hours": 3600,
    "day": 86400,
    "days": 86400,
}


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async database session."""
    async for session in get_session():
        yield session


def parse_rate(value: str, *, fallback: tuple[int, int]) -> tuple[int, int]:
    """Turn a ``"<count>/<window>"`` string into ``(times, seconds)``."""
    try:
        count_str, window_str = value.split("/", 1)
        count = int(count_str.strip())
    except ValueError:
        return fallback
    seconds = _SECONDS_PER_WINDOW.get(window_str.strip().lower(), fallback[1])
    return count, seconds


def rate_limit(limit: tuple[int, int]):
    """Rate-limit a route per client; a no-op while Redis is not initialised."""

    async def _dependency(request: Request, response: Response) -> None:
        if FastAPILimiter.redis is None:
            return None
        limiter = RateLimiter(times=limit[0], seconds=limit[1])
        await limiter(request, response)

    return Depends(_dependency)
