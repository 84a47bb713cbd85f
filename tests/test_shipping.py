from decimal import Decimal

import pytest

from storefront.domain.pricing import ShippingRegion, ShippingThreshold
from storefront.services.shipping import (
    calculate_shipping_cost,
    parse_thresholds,
    region_from_record,
)

D = Decimal


def _tiers(*pairs):
    return tuple(ShippingThreshold(min_subtotal=D(m), price=D(p)) for m, p in pairs)


def test_free_shipping_above_threshold():
    region = ShippingRegion(code="SE", base_price=D("49"), free_shipping_threshold=D("500"))
    assert calculate_shipping_cost(region, D("600")) == 0
    assert calculate_shipping_cost(region, D("500")) == 0


def test_base_price_below_threshold():
    region = ShippingRegion(code="SE", base_price=D("49"), free_shipping_threshold=D("500"))
    assert calculate_shipping_cost(region, D("100")) == D("49")


def test_tiered_picks_highest_qualifying_tier():
    region = ShippingRegion(
        code="SE",
        base_price=D("59"),
        shipping_thresholds=_tiers(("0", "49"), ("300", "29"), ("500", "0")),
    )
    assert calculate_shipping_cost(region, D("350")) == D("29")
    assert calculate_shipping_cost(region, D("299.99")) == D("49")
    assert calculate_shipping_cost(region, D("500")) == D("0")


def test_tiers_sorted_regardless_of_input_order():
    region = ShippingRegion(
        code="SE",
        base_price=D("59"),
        shipping_thresholds=_tiers(("500", "0"), ("0", "49"), ("300", "29")),
    )
    assert [t.min_subtotal for t in region.shipping_thresholds] == [D("0"), D("300"), D("500")]
    assert calculate_shipping_cost(region, D("350")) == D("29")


def test_no_qualifying_tier_falls_back_to_base_price():
    region = ShippingRegion(
        code="EU",
        base_price=D("99"),
        shipping_thresholds=_tiers(("200", "79"), ("400", "59")),
    )
    assert calculate_shipping_cost(region, D("150")) == D("99")


def test_free_threshold_wins_over_tiers():
    region = ShippingRegion(
        code="SE",
        base_price=D("49"),
        free_shipping_threshold=D("400"),
        shipping_thresholds=_tiers(("0", "49"), ("300", "29")),
    )
    assert calculate_shipping_cost(region, D("450")) == 0


@pytest.mark.parametrize("threshold", [None, D("0")])
def test_unset_free_threshold_is_ignored(threshold):
    region = ShippingRegion(code="WORLD", base_price=D("199"), free_shipping_threshold=threshold)
    assert calculate_shipping_cost(region, D("10000")) == D("199")


def test_empty_tier_list_uses_base_price():
    region = ShippingRegion(code="SE", base_price=D("49"), shipping_thresholds=())
    assert calculate_shipping_cost(region, D("350")) == D("49")


def test_parse_thresholds_accepts_admin_form_shape():
    tiers = parse_thresholds(
        '[{"min_order_amount": "300", "shipping_price": "29"}, {"min_subtotal": 0, "price": 49}]'
    )
    assert tiers == (
        ShippingThreshold(min_subtotal=D("300"), price=D("29")),
        ShippingThreshold(min_subtotal=D("0"), price=D("49")),
    )
    assert parse_thresholds(None) is None
    assert parse_thresholds("") is None


def test_parse_thresholds_rejects_incomplete_rows():
    with pytest.raises(ValueError):
        parse_thresholds([{"min_subtotal": "100"}])


def test_region_from_record_mapping():
    region = region_from_record(
        {
            "id": "r1",
            "code": "EU",
            "name_en": "European Union",
            "name_sv": "Europeiska unionen",
            "base_price": 99,
            "free_shipping_threshold": None,
            "shipping_thresholds": None,
            "countries": '["de", "FI"]',
            "active": 1,
        }
    )
    assert region.base_price == D("99")
    assert region.free_shipping_threshold is None
    assert region.shipping_thresholds is None
    assert region.countries == ("DE", "FI")
    assert region.active is True
