# Models package for the storefront

from .discount_code import DiscountCodeORM
from .shipping_region import ShippingRegionORM
from .store_settings import GeneralSettingsORM, StoreSettingsORM

__all__ = [
    "DiscountCodeORM",
    "ShippingRegionORM",
    "StoreSettingsORM",
    "GeneralSettingsORM",
]
