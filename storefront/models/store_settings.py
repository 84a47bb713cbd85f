# storefront/models/store_settings.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db import Base


class StoreSettingsORM(Base):
    """Singleton: er is maximaal 1 rij."""

    __tablename__ = "store_settings"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid4())
    )
    store_name: Mapped[str] = mapped_column(String(200), nullable=False)
    store_email: Mapped[str] = mapped_column(String(320), nullable=False)
    store_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    store_address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    store_city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    store_postal_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    store_country: Mapped[Optional[str]] = mapped_column(String(2), nullable=True)

    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="SEK")
    # percentage, 25 = 25% moms
    tax_rate: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class GeneralSettingsORM(Base):
    __tablename__ = "general_settings"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid4())
    )
    maintenance_mode: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    allow_registrations: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    default_language: Mapped[str] = mapped_column(String(8), nullable=False, default="en")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
