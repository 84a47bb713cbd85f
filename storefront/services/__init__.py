# Services package for the storefront

from .checkout import calculate_order_totals
from .shipping import calculate_shipping_cost
from .tax import default_tax_rate, price_excluding_tax, tax_from_inclusive_price

__all__ = [
    "calculate_order_totals",
    "calculate_shipping_cost",
    "default_tax_rate",
    "price_excluding_tax",
    "tax_from_inclusive_price",
]
