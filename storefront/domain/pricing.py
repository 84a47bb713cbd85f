from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal, Optional, Tuple


@dataclass(frozen=True)
class ShippingThreshold:
    min_subtotal: Decimal
    price: Decimal


@dataclass(frozen=True)
class ShippingRegion:
    """
    Resolved shipping region.

    Thresholds are kept sorted ascending by min_subtotal, whatever order they
    were supplied in.
    """

    code: str
    base_price: Decimal
    free_shipping_threshold: Optional[Decimal] = None
    shipping_thresholds: Optional[Tuple[ShippingThreshold, ...]] = None
    active: bool = True
    id: Optional[str] = None
    name_en: str = ""
    name_sv: str = ""
    countries: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.shipping_thresholds is not None:
            ordered = tuple(
                sorted(self.shipping_thresholds, key=lambda t: t.min_subtotal)
            )
            object.__setattr__(self, "shipping_thresholds", ordered)


@dataclass(frozen=True)
class DiscountCode:
    code: str
    discount_type: Literal["percentage", "fixed"]
    discount_value: Decimal
    maximum_discount: Optional[Decimal] = None


@dataclass(frozen=True)
class CartLine:
    unit_price: Decimal  # incl. moms
    quantity: int


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    discount: Decimal
    shipping_cost: Decimal
    tax: Decimal
    tax_rate: Decimal
    total: Decimal
    currency: str
