# storefront/routers/admin.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.core.logging_config import logger
from storefront.db import get_db
from storefront.repositories import discount_codes as discount_repo
from storefront.repositories import settings as settings_repo
from storefront.repositories import shipping as shipping_repo
from storefront.routers.serializers import region_out
from storefront.schemas.discounts import DiscountCodeCreate, DiscountCodeOut
from storefront.schemas.settings import (
    GeneralSettingsIn,
    GeneralSettingsOut,
    StoreSettingsIn,
    StoreSettingsOut,
)
from storefront.schemas.shipping import ShippingRegionCreate, ShippingRegionUpdate
from storefront.security.admin_auth import AdminIdentity, require_admin
from storefront.services.shipping import region_from_record

router = APIRouter(prefix="/api/admin", tags=["admin"])


NULLABLE_REGION_FIELDS = {"free_shipping_threshold", "shipping_thresholds"}


def _region_columns(payload, *, partial: bool) -> dict:
    data = payload.model_dump(exclude_unset=partial)
    if partial:
        # expliciete null alleen voor kolommen die null mogen zijn
        data = {
            k: v for k, v in data.items() if v is not None or k in NULLABLE_REGION_FIELDS
        }
    if "shipping_thresholds" in data:
        thresholds = payload.shipping_thresholds
        data["shipping_thresholds"] = (
            [t.to_json() for t in thresholds] if thresholds else None
        )
    return data


# ----------------------------
# Shipping regions
# ----------------------------
@router.get("/shipping-regions")
def admin_list_regions(
    db: Session = Depends(get_db), admin: AdminIdentity = Depends(require_admin)
) -> dict:
    # ook inactieve regio's
    regions = shipping_repo.get_shipping_regions(db, active_only=False)
    return {
        "regions": [region_out(region_from_record(r)).model_dump() for r in regions]
    }


@router.post("/shipping-regions")
def admin_create_region(
    payload: ShippingRegionCreate,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(require_admin),
) -> dict:
    row = shipping_repo.create_shipping_region(db, _region_columns(payload, partial=False))
    logger.info("shipping_region_created", region_id=row.id, code=row.code, admin=admin.username)
    return {"region": region_out(region_from_record(row)).model_dump()}


@router.get("/shipping-regions/{region_id}")
def admin_get_region(
    region_id: str,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(require_admin),
) -> dict:
    row = shipping_repo.get_shipping_region_by_id(db, region_id)
    if not row:
        raise HTTPException(status_code=404, detail="Shipping region not found")
    return {"region": region_out(region_from_record(row)).model_dump()}


@router.patch("/shipping-regions/{region_id}")
def admin_update_region(
    region_id: str,
    payload: ShippingRegionUpdate,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(require_admin),
) -> dict:
    try:
        row = shipping_repo.update_shipping_region(
            db, region_id, _region_columns(payload, partial=True)
        )
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("shipping_region_updated", region_id=row.id, admin=admin.username)
    return {"region": region_out(region_from_record(row)).model_dump()}


@router.delete("/shipping-regions/{region_id}")
def admin_delete_region(
    region_id: str,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(require_admin),
) -> dict:
    try:
        shipping_repo.delete_shipping_region(db, region_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("shipping_region_deleted", region_id=region_id, admin=admin.username)
    return {"success": True}


# ----------------------------
# Discount codes
# ----------------------------
@router.get("/discount-codes")
def admin_list_discount_codes(
    db: Session = Depends(get_db), admin: AdminIdentity = Depends(require_admin)
) -> dict:
    rows = discount_repo.get_discount_codes(db)
    return {"discountCodes": [DiscountCodeOut.model_validate(r).model_dump(mode="json") for r in rows]}


@router.post("/discount-codes", status_code=201)
def admin_create_discount_code(
    payload: DiscountCodeCreate,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(require_admin),
) -> dict:
    if discount_repo.get_discount_code_by_code(db, payload.code):
        raise HTTPException(status_code=400, detail="Discount code already exists")

    row = discount_repo.create_discount_code(db, payload.model_dump())
    logger.info("discount_code_created", code=row.code, admin=admin.username)
    return {"discountCode": DiscountCodeOut.model_validate(row).model_dump(mode="json")}


# ----------------------------
# Settings
# ----------------------------
@router.get("/settings/store")
def admin_get_store_settings(
    db: Session = Depends(get_db), admin: AdminIdentity = Depends(require_admin)
) -> dict:
    row = settings_repo.get_store_settings(db)
    return {"settings": StoreSettingsOut.model_validate(row).model_dump() if row else None}


@router.put("/settings/store")
def admin_put_store_settings(
    payload: StoreSettingsIn,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(require_admin),
) -> dict:
    row = settings_repo.upsert_store_settings(db, payload.model_dump())
    logger.info("store_settings_saved", admin=admin.username, tax_rate=str(row.tax_rate))
    return {"settings": StoreSettingsOut.model_validate(row).model_dump()}


@router.get("/settings/general")
def admin_get_general_settings(
    db: Session = Depends(get_db), admin: AdminIdentity = Depends(require_admin)
) -> dict:
    row = settings_repo.get_general_settings(db)
    return {"settings": GeneralSettingsOut.model_validate(row).model_dump() if row else None}


@router.put("/settings/general")
def admin_put_general_settings(
    payload: GeneralSettingsIn,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(require_admin),
) -> dict:
    row = settings_repo.upsert_general_settings(db, payload.model_dump())
    logger.info("general_settings_saved", admin=admin.username)
    return {"settings": GeneralSettingsOut.model_validate(row).model_dump()}
