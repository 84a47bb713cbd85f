import os
import tempfile
from pathlib import Path

# settings worden bij import gelezen, dus env eerst zetten
_TMP_DIR = tempfile.mkdtemp(prefix="storefront-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{Path(_TMP_DIR) / 'test.db'}")
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "secret")

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront import models  # noqa: F401
from storefront.core.rate_limit import limiter
from storefront.db import Base, SessionLocal, engine
from storefront.main import app
from storefront.repositories import discount_codes as discount_repo
from storefront.repositories import shipping as shipping_repo


@pytest.fixture(scope="session", autouse=True)
def _create_test_db():
    Base.metadata.create_all(bind=engine)
    limiter.enabled = False
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def _clean_tables():
    yield
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_auth():
    return ("admin", "secret")


@pytest.fixture
def seeded_regions(db):
    se = shipping_repo.create_shipping_region(
        db,
        {
            "code": "SE",
            "name_en": "Sweden",
            "name_sv": "Sverige",
            "base_price": Decimal("49.00"),
            "free_shipping_threshold": Decimal("500.00"),
            "shipping_thresholds": [
                {"min_subtotal": "300", "price": "29.00"},
                {"min_subtotal": "0", "price": "49.00"},
            ],
            "countries": ["SE"],
        },
    )
    eu = shipping_repo.create_shipping_region(
        db,
        {
            "code": "EU",
            "name_en": "European Union",
            "name_sv": "Europeiska unionen",
            "base_price": Decimal("99.00"),
            "free_shipping_threshold": Decimal("1000.00"),
            "countries": ["DE", "FI", "NL"],
        },
    )
    world = shipping_repo.create_shipping_region(
        db,
        {
            "code": "WORLD",
            "name_en": "Rest of the world",
            "name_sv": "Resten av världen",
            "base_price": Decimal("199.00"),
            "countries": [],
        },
    )
    closed = shipping_repo.create_shipping_region(
        db,
        {
            "code": "NO",
            "name_en": "Norway",
            "name_sv": "Norge",
            "base_price": Decimal("149.00"),
            "countries": ["NO"],
            "active": False,
        },
    )
    return {"SE": se, "EU": eu, "WORLD": world, "NO": closed}


@pytest.fixture
def discount_codes(db):
    now = datetime.now(timezone.utc)
    rows = [
        {"code": "ten", "discount_type": "percentage", "discount_value": Decimal("10")},
        {
            "code": "MINUS50",
            "discount_type": "fixed",
            "discount_value": Decimal("50"),
            "minimum_purchase": Decimal("200"),
        },
        {"code": "OFF", "discount_type": "fixed", "discount_value": Decimal("20"), "active": False},
        {
            "code": "OLD",
            "discount_type": "percentage",
            "discount_value": Decimal("20"),
            "valid_until": now - timedelta(days=1),
        },
        {
            "code": "SOON",
            "discount_type": "percentage",
            "discount_value": Decimal("20"),
            "valid_from": now + timedelta(days=1),
        },
        {
            "code": "USEDUP",
            "discount_type": "fixed",
            "discount_value": Decimal("10"),
            "usage_limit": 5,
            "usage_count": 5,
        },
    ]
    return {r["code"].upper(): discount_repo.create_discount_code(db, r) for r in rows}
