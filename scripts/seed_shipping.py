from decimal import Decimal

from storefront import models  # noqa: F401
from storefront.db import Base, SessionLocal, engine
from storefront.repositories import settings as settings_repo
from storefront.repositories import shipping as shipping_repo

EU_COUNTRIES = [
    "AT", "BE", "BG", "HR", "CY", "CZ", "DK", "EE", "FI", "FR", "DE", "GR", "HU",
    "IE", "IT", "LV", "LT", "LU", "MT", "NL", "PL", "PT", "RO", "SK", "SI", "ES",
]

REGIONS = [
    {
        "code": "SE",
        "name_en": "Sweden",
        "name_sv": "Sverige",
        "base_price": Decimal("49.00"),
        "free_shipping_threshold": Decimal("500.00"),
        "shipping_thresholds": [
            {"min_subtotal": "0", "price": "49.00"},
            {"min_subtotal": "300", "price": "29.00"},
        ],
        "countries": ["SE"],
    },
    {
        "code": "EU",
        "name_en": "European Union",
        "name_sv": "Europeiska unionen",
        "base_price": Decimal("99.00"),
        "free_shipping_threshold": Decimal("1000.00"),
        "countries": EU_COUNTRIES,
    },
    {
        "code": "WORLD",
        "name_en": "Rest of the world",
        "name_sv": "Resten av världen",
        "base_price": Decimal("199.00"),
        "free_shipping_threshold": None,
        "countries": [],
    },
]


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        for data in REGIONS:
            if shipping_repo.get_shipping_region_by_code(db, data["code"]):
                print("Region exists, skipping:", data["code"])
                continue
            shipping_repo.create_shipping_region(db, data)
            print("Seeded region:", data["code"])

        if not settings_repo.get_store_settings(db):
            settings_repo.upsert_store_settings(
                db,
                {
                    "store_name": "Demo Store",
                    "store_email": "info@example.com",
                    "store_country": "SE",
                    "currency": "SEK",
                    "tax_rate": Decimal("25"),
                },
            )
            print("Seeded store settings (25% moms)")
    finally:
        db.close()


if __name__ == "__main__":
    main()
