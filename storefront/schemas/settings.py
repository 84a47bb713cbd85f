# storefront/schemas/settings.py
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, constr


class StoreSettingsIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    store_name: constr(strip_whitespace=True, min_length=1)  # type: ignore
    store_email: constr(strip_whitespace=True, min_length=3)  # type: ignore
    store_phone: Optional[str] = None
    store_address: Optional[str] = None
    store_city: Optional[str] = None
    store_postal_code: Optional[str] = None
    store_country: Optional[constr(min_length=2, max_length=2, to_upper=True)] = None  # type: ignore
    currency: constr(min_length=3, max_length=3, to_upper=True) = "SEK"  # type: ignore
    # percentage: 25 = 25%
    tax_rate: Decimal = Field(Decimal("0"), ge=0, lt=100)


class StoreSettingsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    store_name: str
    store_email: str
    store_phone: Optional[str] = None
    store_address: Optional[str] = None
    store_city: Optional[str] = None
    store_postal_code: Optional[str] = None
    store_country: Optional[str] = None
    currency: str
    tax_rate: float


class GeneralSettingsIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    maintenance_mode: bool = False
    allow_registrations: bool = True
    default_language: constr(strip_whitespace=True, min_length=2, max_length=8, to_lower=True) = "en"  # type: ignore


class GeneralSettingsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    maintenance_mode: bool
    allow_registrations: bool
    default_language: str
