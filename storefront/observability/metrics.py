# storefront/observability/metrics.py
from fastapi import APIRouter
from starlette.responses import Response

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

router = APIRouter(tags=["observability"])

shipping_calc_counter = Counter(
    "storefront_shipping_calculations_total",
    "Aantal shipping berekeningen",
    ["result"],  # paid|free|not_found
)

region_detect_counter = Counter(
    "storefront_region_detect_total",
    "Aantal region detecties",
    ["result"],  # found|not_found
)

tax_rate_fallback_counter = Counter(
    "storefront_tax_rate_fallback_total",
    "Aantal keer dat de default moms gebruikt werd door een fout",
)

order_total_hist = Histogram(
    "storefront_order_total",
    "Ordertotalen uit /api/checkout/totals",
    buckets=(100, 250, 500, 1000, 2500, 5000, 10000, 25000),
)


discount_validation_counter = Counter(
    "storefront_discount_validation_total",
    "Aantal kortingscode validaties",
    ["result"],  # valid|invalid
)


@router.get("/metrics", include_in_schema=True)
def metrics() -> Response:
    # Prometheus expects text/plain; version=0.0.4
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
