"""Service package models."""

from __future__ import annotations

import uuid

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from chauffeur.db.base import Base
from chauffeur.models.mixins import TimestampMixin


class ServicePackage(TimestampMixin, Base):
    """Chauffeur experience a customer books (airport run, wedding, tour)."""

    __tablename__ = "service_packages"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(String(1024))
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
