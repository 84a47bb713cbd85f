from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional

from storefront.domain.pricing import ShippingRegion, ShippingThreshold
from storefront.services.money import ZERO, to_decimal


def calculate_shipping_cost(region: ShippingRegion, subtotal) -> Decimal:
    """
    Shipping cost for an already resolved region.

    1. free shipping when subtotal >= free_shipping_threshold
    2. else the highest tier with min_subtotal <= subtotal (base_price if none)
    3. else base_price
    """
    subtotal = to_decimal(subtotal)

    threshold = region.free_shipping_threshold
    if threshold and subtotal >= threshold:
        return ZERO

    tiers = region.shipping_thresholds or ()
    if tiers:
        # tiers staan oplopend gesorteerd; laatste match is de hoogste
        chosen = None
        for tier in tiers:
            if tier.min_subtotal <= subtotal:
                chosen = tier
        if chosen is not None:
            return chosen.price

    return region.base_price


def _get(record: Any, key: str, default=None):
    if isinstance(record, Mapping):
        return record.get(key, default)
    return getattr(record, key, default)


def _load_json_list(raw) -> list:
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = raw.strip()
        return json.loads(raw) if raw else []
    return list(raw)


def parse_thresholds(raw) -> Optional[tuple[ShippingThreshold, ...]]:
    """
    Accepts [{min_subtotal, price}] as well as the admin form shape
    [{min_order_amount, shipping_price}]. Empty input -> None.
    """
    items: Iterable = _load_json_list(raw)
    out = []
    for t in items:
        if isinstance(t, ShippingThreshold):
            out.append(t)
            continue
        min_subtotal = t.get("min_subtotal", t.get("min_order_amount"))
        price = t.get("price", t.get("shipping_price"))
        if min_subtotal is None or price is None:
            raise ValueError(f"Invalid shipping threshold: {t!r}")
        out.append(
            ShippingThreshold(
                min_subtotal=to_decimal(min_subtotal), price=to_decimal(price)
            )
        )
    return tuple(out) or None


def region_from_record(record: Any) -> ShippingRegion:
    """Convert a persisted row (ORM object or dict) into a ShippingRegion."""
    return ShippingRegion(
        id=_get(record, "id"),
        code=_get(record, "code"),
        name_en=_get(record, "name_en") or "",
        name_sv=_get(record, "name_sv") or "",
        base_price=to_decimal(_get(record, "base_price", 0)),
        free_shipping_threshold=to_decimal(_get(record, "free_shipping_threshold")),
        shipping_thresholds=parse_thresholds(_get(record, "shipping_thresholds")),
        countries=tuple(
            c.upper() for c in _load_json_list(_get(record, "countries"))
        ),
        active=bool(_get(record, "active", True)),
    )
