from decimal import Decimal
from types import SimpleNamespace

import pytest

from storefront.services.tax import (
    default_tax_rate,
    inclusive_breakdown,
    price_excluding_tax,
    resolve_tax_rate,
    tax_from_inclusive_price,
)


@pytest.mark.parametrize("price", [Decimal("0"), Decimal("125"), Decimal("99.90")])
def test_zero_rate_has_no_tax(price):
    assert tax_from_inclusive_price(price, 0) == 0
    assert price_excluding_tax(price, 0) == price


def test_negative_rate_treated_as_no_tax():
    assert tax_from_inclusive_price(Decimal("100"), Decimal("-0.1")) == 0
    assert price_excluding_tax(Decimal("100"), Decimal("-0.1")) == Decimal("100")


def test_swedish_vat_on_125():
    # 125 incl. 25% moms = 100 + 25
    assert tax_from_inclusive_price(Decimal("125"), Decimal("0.25")) == Decimal("25")
    assert price_excluding_tax(Decimal("125"), Decimal("0.25")) == Decimal("100")


@pytest.mark.parametrize(
    "price,rate",
    [
        (Decimal("99.90"), Decimal("0.25")),
        (Decimal("1"), Decimal("0.12")),
        (Decimal("349"), Decimal("0.06")),
        (Decimal("0.01"), Decimal("0.99")),
    ],
)
def test_exclusive_plus_tax_is_inclusive(price, rate):
    total = price_excluding_tax(price, rate) + tax_from_inclusive_price(price, rate)
    assert abs(total - price) < Decimal("1e-20")


def test_accepts_floats_and_strings():
    assert tax_from_inclusive_price(125.0, "0.25") == Decimal("25")
    assert price_excluding_tax("250", 0.25) == Decimal("200")


def test_default_tax_rate():
    assert default_tax_rate() == Decimal("0.25")


def test_resolve_tax_rate_from_percentage():
    assert resolve_tax_rate(SimpleNamespace(tax_rate=Decimal("12"))) == Decimal("0.12")


@pytest.mark.parametrize("store", [None, SimpleNamespace(tax_rate=0), SimpleNamespace(tax_rate=None)])
def test_resolve_tax_rate_falls_back_to_default(store):
    assert resolve_tax_rate(store) == Decimal("0.25")


def test_inclusive_breakdown_adds_up():
    b = inclusive_breakdown(Decimal("99.90"), Decimal("0.25"))
    assert b.vat_amount == Decimal("19.98")
    assert b.subtotal_excl_vat == Decimal("79.92")
    assert b.subtotal_excl_vat + b.vat_amount == b.total_incl_vat
