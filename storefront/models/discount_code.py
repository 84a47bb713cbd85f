# storefront/models/discount_code.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db import Base


class DiscountCodeORM(Base):
    __tablename__ = "discount_codes"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid4())
    )
    # altijd uppercase opgeslagen
    code: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    discount_type: Mapped[str] = mapped_column(String(16), nullable=False)  # percentage|fixed
    discount_value: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    minimum_purchase: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=0)
    maximum_discount: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)

    usage_limit: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)  # None = onbeperkt
    usage_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    valid_from: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    valid_until: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

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
        return f"<DiscountCodeORM code={self.code!r} active={self.active}>"
