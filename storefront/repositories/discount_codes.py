from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, NamedTuple, Optional

from sqlalchemy.orm import Session

from storefront.models.discount_code import DiscountCodeORM
from storefront.services.money import to_decimal


class DiscountValidation(NamedTuple):
    """Result of validate_discount_code; error is set when valid is False."""

    valid: bool
    discount_code: Optional[DiscountCodeORM] = None
    error: Optional[str] = None


def _as_utc(dt: Optional[datetime]) -> Optional[datetime]:
    # SQLite geeft naive datetimes terug; die zijn UTC
    if dt is None or dt.tzinfo is not None:
        return dt
    return dt.replace(tzinfo=timezone.utc)


def get_discount_codes(db: Session) -> list[DiscountCodeORM]:
    return db.query(DiscountCodeORM).order_by(DiscountCodeORM.created_at.desc()).all()


def get_discount_code_by_code(db: Session, code: str) -> DiscountCodeORM | None:
    return (
        db.query(DiscountCodeORM)
        .filter(DiscountCodeORM.code == code.strip().upper())
        .first()
    )


def create_discount_code(db: Session, data: dict[str, Any]) -> DiscountCodeORM:
    data = {**data, "code": data["code"].strip().upper()}
    discount_code = DiscountCodeORM(**data)
    db.add(discount_code)
    db.commit()
    db.refresh(discount_code)
    return discount_code


def validate_discount_code(
    db: Session,
    code: str,
    subtotal,
    now: Optional[datetime] = None,
) -> DiscountValidation:
    discount_code = get_discount_code_by_code(db, code)

    if not discount_code:
        return DiscountValidation(False, error="Discount code not found")

    if not discount_code.active:
        return DiscountValidation(False, error="Discount code is inactive")

    now = now or datetime.now(timezone.utc)
    valid_from = _as_utc(discount_code.valid_from)
    valid_until = _as_utc(discount_code.valid_until)
    if valid_from and now < valid_from:
        return DiscountValidation(False, error="Discount code is not yet valid")
    if valid_until and now > valid_until:
        return DiscountValidation(False, error="Discount code has expired")

    minimum = discount_code.minimum_purchase or Decimal("0")
    if to_decimal(subtotal) < minimum:
        return DiscountValidation(
            False, error=f"Minimum purchase of {minimum} required"
        )

    if (
        discount_code.usage_limit is not None
        and discount_code.usage_count >= discount_code.usage_limit
    ):
        return DiscountValidation(
            False, error="Discount code has reached its usage limit"
        )

    return DiscountValidation(True, discount_code=discount_code)
