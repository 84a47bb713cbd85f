from decimal import Decimal, ROUND_HALF_UP

MONEY = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(v) -> Decimal | None:
    if v is None:
        return None
    if isinstance(v, Decimal):
        return v
    # via str() zodat floats als 0.1 geen binaire staart meekrijgen
    return Decimal(str(v))


def qmoney(x) -> Decimal:
    return to_decimal(x).quantize(MONEY, rounding=ROUND_HALF_UP)
