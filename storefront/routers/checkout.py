# storefront/routers/checkout.py
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from storefront.config import settings
from storefront.core.logging_config import logger
from storefront.core.rate_limit import limiter, public_limit
from storefront.db import get_db
from storefront.domain.pricing import CartLine
from storefront.models.store_settings import StoreSettingsORM
from storefront.observability.metrics import (
    discount_validation_counter,
    order_total_hist,
    tax_rate_fallback_counter,
)
from storefront.repositories import discount_codes as discount_repo
from storefront.repositories import settings as settings_repo
from storefront.repositories import shipping as shipping_repo
from storefront.schemas.checkout import (
    OrderTotalsRequest,
    OrderTotalsResponse,
    TaxRateResponse,
    ValidateDiscountRequest,
)
from storefront.services.checkout import calculate_order_totals, calculate_subtotal
from storefront.services.discounts import calculate_discount_amount, discount_from_record
from storefront.services.money import qmoney
from storefront.services.shipping import region_from_record
from storefront.services.tax import resolve_tax_rate

router = APIRouter(prefix="/api/checkout", tags=["checkout"])


def load_store_settings(db: Session) -> StoreSettingsORM | None:
    """Store settings, of None als de DB faalt (dan geldt de default moms)."""
    try:
        return settings_repo.get_store_settings(db)
    except Exception:
        logger.exception("store_settings_lookup_failed")
        tax_rate_fallback_counter.inc()
        return None


def _validated_discount(db: Session, code: str, subtotal):
    validation = discount_repo.validate_discount_code(db, code, subtotal)
    if not validation.valid:
        discount_validation_counter.labels(result="invalid").inc()
        raise HTTPException(status_code=400, detail=validation.error or "Invalid discount code")

    discount_validation_counter.labels(result="valid").inc()
    return validation.discount_code


@router.get("/tax")
def get_tax_rate(db: Session = Depends(get_db)) -> dict:
    rate = resolve_tax_rate(load_store_settings(db))
    return TaxRateResponse(tax_rate=float(rate)).model_dump(by_alias=True)


@router.post("/validate-discount")
@limiter.limit(public_limit)
def validate_discount(
    request: Request,
    payload: ValidateDiscountRequest,
    db: Session = Depends(get_db),
) -> dict:
    row = _validated_discount(db, payload.code, payload.subtotal)
    amount = calculate_discount_amount(discount_from_record(row), payload.subtotal)

    return {
        "valid": True,
        "discountCode": {
            "id": row.id,
            "code": row.code,
            "discount_type": row.discount_type,
            "discount_value": float(row.discount_value),
        },
        "discountAmount": float(amount),
    }


@router.post("/totals")
@limiter.limit(public_limit)
def order_totals(
    request: Request,
    payload: OrderTotalsRequest,
    db: Session = Depends(get_db),
) -> dict:
    lines = [CartLine(unit_price=line.unit_price, quantity=line.quantity) for line in payload.lines]

    region = None
    if payload.region_code:
        row = shipping_repo.get_shipping_region_by_code(db, payload.region_code)
        if row:
            region = region_from_record(row)
        else:
            # onbekende regio: geen verzendkosten, zoals bij order aanmaken
            logger.warning("shipping_region_not_found", region_code=payload.region_code)

    discount = None
    if payload.discount_code:
        row = _validated_discount(db, payload.discount_code, calculate_subtotal(lines))
        discount = discount_from_record(row)

    store = load_store_settings(db)

    totals = calculate_order_totals(
        lines=lines,
        region=region,
        tax_rate=resolve_tax_rate(store),
        discount_code=discount,
        currency=store.currency if store else settings.default_currency,
    )
    order_total_hist.observe(float(totals.total))

    out = OrderTotalsResponse(
        subtotal=float(qmoney(totals.subtotal)),
        discount=float(qmoney(totals.discount)),
        shipping_cost=float(qmoney(totals.shipping_cost)),
        tax=float(qmoney(totals.tax)),
        tax_rate=float(totals.tax_rate),
        total=float(qmoney(totals.total)),
        currency=totals.currency,
    )
    return out.model_dump(by_alias=True)
