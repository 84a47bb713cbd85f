# storefront/routers/locale.py
from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Header, Query
from sqlalchemy.orm import Session

from storefront.core.logging_config import logger
from storefront.db import get_db
from storefront.repositories import settings as settings_repo
from storefront.services.i18n import resolve_locale

router = APIRouter(prefix="/api", tags=["i18n"])


def store_default_language(db: Session) -> Optional[str]:
    try:
        general = settings_repo.get_general_settings(db)
    except Exception:
        # zonder settings valt resolve_locale terug op de config default
        logger.exception("general_settings_lookup_failed")
        return None
    return general.default_language if general else None


@router.get("/locale")
def get_locale(
    lang: Optional[str] = Query(None),
    locale_cookie: Optional[str] = Cookie(None, alias="locale"),
    accept_language: Optional[str] = Header(None, alias="Accept-Language"),
    db: Session = Depends(get_db),
) -> dict:
    locale = resolve_locale(
        requested=lang or locale_cookie,
        accept_language=accept_language,
        default_language=store_default_language(db),
    )
    return {"locale": locale}
