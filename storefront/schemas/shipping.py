# storefront/schemas/shipping.py
from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, constr, field_validator


class ShippingThresholdIn(BaseModel):
    # admin formulier stuurt min_order_amount/shipping_price
    min_subtotal: Decimal = Field(
        ge=0, validation_alias=AliasChoices("min_subtotal", "min_order_amount")
    )
    price: Decimal = Field(ge=0, validation_alias=AliasChoices("price", "shipping_price"))

    def to_json(self) -> dict:
        return {"min_subtotal": str(self.min_subtotal), "price": str(self.price)}


def _upper_codes(v: Optional[List[str]]) -> Optional[List[str]]:
    if v is None:
        return v
    return [c.strip().upper() for c in v if c and c.strip()]


class ShippingRegionCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name_en: constr(strip_whitespace=True, min_length=1)  # type: ignore
    name_sv: constr(strip_whitespace=True, min_length=1)  # type: ignore
    code: constr(strip_whitespace=True, min_length=2, max_length=16, to_upper=True)  # type: ignore
    base_price: Decimal = Field(ge=0)
    free_shipping_threshold: Optional[Decimal] = Field(None, ge=0)
    shipping_thresholds: Optional[List[ShippingThresholdIn]] = None
    countries: List[str] = Field(default_factory=list)
    active: bool = True

    @field_validator("countries")
    @classmethod
    def normalize_countries(cls, v):
        return _upper_codes(v)


class ShippingRegionUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name_en: Optional[constr(strip_whitespace=True, min_length=1)] = None  # type: ignore
    name_sv: Optional[constr(strip_whitespace=True, min_length=1)] = None  # type: ignore
    code: Optional[constr(strip_whitespace=True, min_length=2, max_length=16, to_upper=True)] = None  # type: ignore
    base_price: Optional[Decimal] = Field(None, ge=0)
    free_shipping_threshold: Optional[Decimal] = Field(None, ge=0)
    shipping_thresholds: Optional[List[ShippingThresholdIn]] = None
    countries: Optional[List[str]] = None
    active: Optional[bool] = None

    @field_validator("countries")
    @classmethod
    def normalize_countries(cls, v):
        return _upper_codes(v)


class ShippingThresholdOut(BaseModel):
    min_subtotal: float
    price: float


class ShippingRegionOut(BaseModel):
    id: str
    name_en: str
    name_sv: str
    code: str
    base_price: float
    free_shipping_threshold: Optional[float] = None
    shipping_thresholds: Optional[List[ShippingThresholdOut]] = None
    countries: List[str] = Field(default_factory=list)
    active: bool


class RegionSummary(BaseModel):
    id: str
    name_en: str
    name_sv: str
    code: str


class ShippingCalculateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    region_code: constr(strip_whitespace=True, min_length=1) = Field(alias="regionCode")  # type: ignore
    subtotal: Decimal = Field(gt=0)


class ShippingCalculateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    shipping_cost: float = Field(serialization_alias="shippingCost")
    region: RegionSummary


class DetectRegionRequest(BaseModel):
    # ISO landcode (SE, NO, DE, ...)
    country: constr(strip_whitespace=True, min_length=2, max_length=2, to_upper=True)  # type: ignore
