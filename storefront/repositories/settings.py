from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from storefront.models.store_settings import GeneralSettingsORM, StoreSettingsORM


def get_store_settings(db: Session) -> StoreSettingsORM | None:
    return (
        db.query(StoreSettingsORM)
        .order_by(StoreSettingsORM.created_at.asc(), StoreSettingsORM.id.asc())
        .first()
    )


def upsert_store_settings(db: Session, data: dict[str, Any]) -> StoreSettingsORM:
    settings = get_store_settings(db)
    if settings is None:
        settings = StoreSettingsORM(**data)
        db.add(settings)
    else:
        for key, value in data.items():
            setattr(settings, key, value)

    db.commit()
    db.refresh(settings)
    return settings


def get_general_settings(db: Session) -> GeneralSettingsORM | None:
    return (
        db.query(GeneralSettingsORM)
        .order_by(GeneralSettingsORM.created_at.asc(), GeneralSettingsORM.id.asc())
        .first()
    )


def upsert_general_settings(db: Session, data: dict[str, Any]) -> GeneralSettingsORM:
    settings = get_general_settings(db)
    if settings is None:
        settings = GeneralSettingsORM(**data)
        db.add(settings)
    else:
        for key, value in data.items():
            setattr(settings, key, value)

    db.commit()
    db.refresh(settings)
    return settings
