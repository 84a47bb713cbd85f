# storefront/schemas/discounts.py
from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, constr, field_validator, model_validator


class DiscountCodeCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    code: constr(strip_whitespace=True, min_length=1, max_length=64, to_upper=True)  # type: ignore
    description: Optional[str] = None
    discount_type: Literal["percentage", "fixed"]
    discount_value: Decimal = Field(gt=0)
    minimum_purchase: Decimal = Field(Decimal("0"), ge=0)
    maximum_discount: Optional[Decimal] = Field(None, ge=0)
    usage_limit: Optional[int] = Field(None, ge=1)
    valid_from: Optional[datetime] = None
    valid_until: Optional[datetime] = None
    active: bool = True

    @field_validator("valid_from", "valid_until")
    @classmethod
    def assume_utc(cls, v):
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @model_validator(mode="after")
    def check_terms(self):
        if self.discount_type == "percentage" and self.discount_value > 100:
            raise ValueError("Percentage discount cannot exceed 100%")
        if self.valid_from and self.valid_until and self.valid_until < self.valid_from:
            raise ValueError("valid_until must be after valid_from")
        return self


class DiscountCodeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    description: Optional[str] = None
    discount_type: str
    discount_value: float
    minimum_purchase: float
    maximum_discount: Optional[float] = None
    usage_limit: Optional[int] = None
    usage_count: int
    valid_from: Optional[datetime] = None
    valid_until: Optional[datetime] = None
    active: bool
