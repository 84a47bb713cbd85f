from __future__ import annotations

from storefront.domain.pricing import ShippingRegion
from storefront.schemas.shipping import (
    RegionSummary,
    ShippingRegionOut,
    ShippingThresholdOut,
)


def _f(v) -> float | None:
    return float(v) if v is not None else None


def region_out(region: ShippingRegion) -> ShippingRegionOut:
    return ShippingRegionOut(
        id=region.id,
        name_en=region.name_en,
        name_sv=region.name_sv,
        code=region.code,
        base_price=float(region.base_price),
        free_shipping_threshold=_f(region.free_shipping_threshold),
        shipping_thresholds=[
            ShippingThresholdOut(min_subtotal=float(t.min_subtotal), price=float(t.price))
            for t in region.shipping_thresholds
        ]
        if region.shipping_thresholds
        else None,
        countries=list(region.countries),
        active=region.active,
    )


def region_summary(region: ShippingRegion) -> RegionSummary:
    return RegionSummary(
        id=region.id, name_en=region.name_en, name_sv=region.name_sv, code=region.code
    )
