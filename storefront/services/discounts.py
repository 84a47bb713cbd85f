from decimal import Decimal

from storefront.domain.pricing import DiscountCode
from storefront.services.money import qmoney, to_decimal


def discount_from_record(record) -> DiscountCode:
    return DiscountCode(
        code=record.code,
        discount_type=record.discount_type,
        discount_value=to_decimal(record.discount_value),
        maximum_discount=to_decimal(record.maximum_discount),
    )


def calculate_discount_amount(discount_code: DiscountCode, subtotal) -> Decimal:
    subtotal = to_decimal(subtotal)
    value = to_decimal(discount_code.discount_value)

    if discount_code.discount_type == "percentage":
        discount = subtotal * value / Decimal("100")
        cap = discount_code.maximum_discount
        if cap is not None and discount > cap:
            discount = to_decimal(cap)
    else:
        # vast bedrag, nooit meer dan het subtotaal
        discount = min(value, subtotal)

    return qmoney(discount)
