from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from storefront.config import settings
from storefront.core.logging_config import logger
from storefront.domain.pricing import CartLine, DiscountCode, OrderTotals, ShippingRegion
from storefront.services.discounts import calculate_discount_amount
from storefront.services.money import ZERO, to_decimal
from storefront.services.shipping import calculate_shipping_cost
from storefront.services.tax import tax_from_inclusive_price


def calculate_subtotal(lines: Iterable[CartLine]) -> Decimal:
    return sum((to_decimal(line.unit_price) * line.quantity for line in lines), ZERO)


def calculate_order_totals(
    lines: Iterable[CartLine],
    region: Optional[ShippingRegion],
    tax_rate,
    discount_code: Optional[DiscountCode] = None,
    currency: Optional[str] = None,
) -> OrderTotals:
    """
    Checkout totals for tax-inclusive cart lines.

    Shipping and tax are both computed on the subtotal before discount.
    Tax is informational only: total = subtotal - discount + shipping.
    """
    subtotal = calculate_subtotal(lines)
    rate = to_decimal(tax_rate)

    discount = ZERO
    if discount_code is not None:
        discount = calculate_discount_amount(discount_code, subtotal)

    shipping_cost = ZERO
    if region is not None:
        shipping_cost = calculate_shipping_cost(region, subtotal)

    tax = tax_from_inclusive_price(subtotal, rate)
    total = subtotal - discount + shipping_cost

    logger.debug(
        "order_totals_calculated",
        subtotal=str(subtotal),
        discount=str(discount),
        shipping_cost=str(shipping_cost),
        region=region.code if region else None,
    )

    return OrderTotals(
        subtotal=subtotal,
        discount=discount,
        shipping_cost=shipping_cost,
        tax=tax,
        tax_rate=rate,
        total=total,
        currency=currency or settings.default_currency,
    )
