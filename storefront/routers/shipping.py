# storefront/routers/shipping.py
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from storefront.core.logging_config import logger
from storefront.core.rate_limit import limiter, public_limit
from storefront.db import get_db
from storefront.observability.metrics import region_detect_counter, shipping_calc_counter
from storefront.repositories import shipping as shipping_repo
from storefront.routers.serializers import region_out, region_summary
from storefront.schemas.shipping import (
    DetectRegionRequest,
    ShippingCalculateRequest,
    ShippingCalculateResponse,
)
from storefront.services.shipping import calculate_shipping_cost, region_from_record

router = APIRouter(prefix="/api/shipping", tags=["shipping"])


@router.get("/regions")
def list_regions(db: Session = Depends(get_db)) -> dict:
    regions = shipping_repo.get_shipping_regions(db, active_only=True)
    return {
        "regions": [region_out(region_from_record(r)).model_dump() for r in regions]
    }


@router.post("/calculate")
@limiter.limit(public_limit)
def calculate_shipping(
    request: Request,
    payload: ShippingCalculateRequest,
    db: Session = Depends(get_db),
) -> dict:
    row = shipping_repo.get_shipping_region_by_code(db, payload.region_code)
    if not row:
        shipping_calc_counter.labels(result="not_found").inc()
        raise HTTPException(status_code=404, detail="Shipping region not found")

    region = region_from_record(row)
    cost = calculate_shipping_cost(region, payload.subtotal)

    shipping_calc_counter.labels(result="free" if cost == 0 else "paid").inc()
    logger.info(
        "shipping_calculated",
        region=region.code,
        subtotal=str(payload.subtotal),
        shipping_cost=str(cost),
    )

    out = ShippingCalculateResponse(
        shipping_cost=float(cost), region=region_summary(region)
    )
    return out.model_dump(by_alias=True)


@router.post("/detect-region")
@limiter.limit(public_limit)
def detect_region(
    request: Request,
    payload: DetectRegionRequest,
    db: Session = Depends(get_db),
) -> dict:
    row = shipping_repo.get_shipping_region_by_country(db, payload.country)
    if not row:
        region_detect_counter.labels(result="not_found").inc()
        raise HTTPException(
            status_code=404, detail="No shipping region found for this country"
        )

    region_detect_counter.labels(result="found").inc()
    return {"region": region_out(region_from_record(row)).model_dump()}
