# storefront/schemas/checkout.py
from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, constr


class CartLineIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    unit_price: Decimal = Field(ge=0, alias="unitPrice")
    quantity: int = Field(ge=1)


class OrderTotalsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    lines: List[CartLineIn] = Field(min_length=1)
    region_code: Optional[str] = Field(None, alias="regionCode")
    # alleen de code; de voorwaarden komen uit de database
    discount_code: Optional[constr(strip_whitespace=True, min_length=1)] = Field(  # type: ignore
        None, alias="discountCode"
    )


class OrderTotalsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    subtotal: float
    discount: float
    shipping_cost: float = Field(serialization_alias="shippingCost")
    tax: float
    tax_rate: float = Field(serialization_alias="taxRate")
    total: float
    currency: str


class TaxRateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tax_rate: float = Field(serialization_alias="taxRate")


class ValidateDiscountRequest(BaseModel):
    code: constr(strip_whitespace=True, min_length=1)  # type: ignore
    subtotal: Decimal = Field(gt=0)
