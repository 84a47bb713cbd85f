"""
Moms (VAT) helpers for tax-inclusive shop prices.

Catalogue prices are stored incl. moms, so the checkout never adds tax on
top; it only extracts the embedded amount for invoices and order records.
"""
from dataclasses import dataclass
from decimal import Decimal

from storefront.services.money import ZERO, qmoney, to_decimal

DEFAULT_TAX_RATE = Decimal("0.25")  # 25% moms (SE)


@dataclass(frozen=True)
class VatBreakdown:
    subtotal_excl_vat: Decimal
    vat_rate: Decimal
    vat_amount: Decimal
    total_incl_vat: Decimal


def default_tax_rate() -> Decimal:
    return DEFAULT_TAX_RATE


def tax_from_inclusive_price(price_inclusive, tax_rate) -> Decimal:
    """Tax embedded in a tax-inclusive price: price * (rate / (1 + rate))."""
    price = to_decimal(price_inclusive)
    rate = to_decimal(tax_rate)
    if rate <= 0:
        return ZERO
    return price * (rate / (1 + rate))


def price_excluding_tax(price_inclusive, tax_rate) -> Decimal:
    """Tax-exclusive price: price / (1 + rate)."""
    price = to_decimal(price_inclusive)
    rate = to_decimal(tax_rate)
    if rate <= 0:
        return price
    return price / (1 + rate)


def resolve_tax_rate(store_settings) -> Decimal:
    """
    Store settings keep tax_rate as a percentage (25 = 25%).
    Missing record or a 0/empty rate falls back to the default.
    """
    pct = getattr(store_settings, "tax_rate", None) if store_settings else None
    if not pct:
        return default_tax_rate()
    return to_decimal(pct) / Decimal("100")


def inclusive_breakdown(price_inclusive, tax_rate) -> VatBreakdown:
    total = qmoney(price_inclusive)
    rate = to_decimal(tax_rate)
    vat_amount = qmoney(tax_from_inclusive_price(total, rate))
    # excl. = totaal - moms, zodat de regels op het factuur optellen
    return VatBreakdown(total - vat_amount, rate, vat_amount, total)
