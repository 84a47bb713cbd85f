# Routers package for the storefront

from . import admin, checkout, locale, shipping

__all__ = [
    "admin",
    "checkout",
    "locale",
    "shipping",
]
