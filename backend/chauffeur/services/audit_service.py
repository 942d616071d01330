"""Helper utilities for recording audit events."""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from chauffeur.models.audit_event import AuditEvent


async def record_event(
    session: AsyncSession,
    *,
    event_type: str,
    actor: str | None = None,
    description: str | None = None,
    payload: dict[str, Any] | None = None,
    commit: bool = True,
) -> AuditEvent:
    """Persist an audit event and return it.

    With ``commit=False`` the event is only flushed, so it lands in the same
    transaction as the change it describes.
    """
    event = AuditEvent(
        event_type=event_type,
        actor=actor,
        description=description,
        payload=payload,
    )
    session.add(event)
    if not commit:
        await session.flush()
        return event
    await session.commit()
    await session.refresh(event)
    return event
