from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from storefront.models.shipping_region import ShippingRegionORM

FALLBACK_REGION_CODE = "WORLD"


def get_shipping_regions(db: Session, active_only: bool = True) -> list[ShippingRegionORM]:
    q = db.query(ShippingRegionORM)
    if active_only:
        q = q.filter(ShippingRegionORM.active.is_(True))
    return q.order_by(ShippingRegionORM.name_en.asc()).all()


def get_shipping_region_by_code(db: Session, code: str) -> ShippingRegionORM | None:
    return (
        db.query(ShippingRegionORM)
        .filter(
            ShippingRegionORM.code == code.strip().upper(),
            ShippingRegionORM.active.is_(True),
        )
        .first()
    )


def get_shipping_region_by_id(db: Session, region_id: str) -> ShippingRegionORM | None:
    return db.query(ShippingRegionORM).filter(ShippingRegionORM.id == region_id).first()


def get_shipping_region_by_country(db: Session, country: str) -> ShippingRegionORM | None:
    """
    Active region whose countries list holds the ISO code, then a region
    with that code, then the WORLD region.
    """
    country = country.strip().upper()
    regions = get_shipping_regions(db, active_only=True)

    for region in regions:
        if country in [c.upper() for c in (region.countries or [])]:
            return region

    by_code: dict[str, ShippingRegionORM] = {r.code: r for r in regions}
    return by_code.get(country) or by_code.get(FALLBACK_REGION_CODE)


def create_shipping_region(db: Session, data: dict[str, Any]) -> ShippingRegionORM:
    region = ShippingRegionORM(**data)
    db.add(region)
    db.commit()
    db.refresh(region)
    return region


def update_shipping_region(
    db: Session, region_id: str, changes: dict[str, Any]
) -> ShippingRegionORM:
    region = get_shipping_region_by_id(db, region_id)
    if not region:
        raise ValueError(f"Shipping region {region_id} not found")

    for key, value in changes.items():
        setattr(region, key, value)

    db.commit()
    db.refresh(region)
    return region


def delete_shipping_region(db: Session, region_id: str) -> None:
    region = get_shipping_region_by_id(db, region_id)
    if not region:
        raise ValueError(f"Shipping region {region_id} not found")

    db.delete(region)
    db.commit()
