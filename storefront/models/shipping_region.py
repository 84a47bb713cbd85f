# storefront/models/shipping_region.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from uuid import uuid4

from sqlalchemy import JSON, Boolean, DateTime, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db import Base


class ShippingRegionORM(Base):
    __tablename__ = "shipping_regions"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid4())
    )
    name_en: Mapped[str] = mapped_column(String(200), nullable=False)
    name_sv: Mapped[str] = mapped_column(String(200), nullable=False)
    code: Mapped[str] = mapped_column(String(16), index=True, nullable=False)

    base_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    free_shipping_threshold: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(10, 2), nullable=True
    )
    # [{"min_subtotal": "300.00", "price": "29.00"}, ...]
    shipping_thresholds: Mapped[Optional[list[dict[str, Any]]]] = mapped_column(
        JSON, nullable=True
    )
    # ISO-2 landcodes, bijv. ["SE"] of ["AT", "BE", "DE", ...]
    countries: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<ShippingRegionORM id={self.id} code={self.code!r} active={self.active}>"
