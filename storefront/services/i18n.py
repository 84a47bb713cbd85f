from __future__ import annotations

import re
from typing import Iterable, Optional

from storefront.config import settings

# Gewichten voor Accept-Language parsing
Q_WEIGHT_PATTERN = re.compile(r"q=([0-9.]+)")


# ============ CORE FUNCTIE ============


def resolve_locale(
    *,
    requested: Optional[str] = None,  # URL segment / ?lang= / cookie
    accept_language: Optional[str] = None,
    default_language: Optional[str] = None,  # uit GeneralSettings
    supported: Optional[Iterable[str]] = None,
    fallback: Optional[str] = None,
) -> str:
    """
    Bepaal locale op basis van:
    1. Expliciete keuze (URL/cookie)
    2. Browser Accept-Language (met q-waarden)
    3. Winkel default_language uit de database
    4. Fallback uit config
    """
    supported_set = {s.lower() for s in (supported or settings.supported_locales)}
    fallback = (fallback or settings.default_locale).lower()

    # 1) Expliciete keuze wint altijd
    code = _normalize_lang(requested)
    if code in supported_set:
        return code

    # 2) Browser preferences (gewogen!)
    browser_lang = _parse_accept_language(accept_language, supported_set)
    if browser_lang:
        return browser_lang

    # 3) Store default
    code = _normalize_lang(default_language)
    if code in supported_set:
        return code

    return fallback


# ============ HELPERS ============


def _normalize_lang(code: Optional[str]) -> Optional[str]:
    """Normaliseer taalcode naar base (sv-SE → sv)"""
    if not code:
        return None
    return code.strip().lower().split("-")[0].split("_")[0]


def _parse_accept_language(header: Optional[str], supported: set[str]) -> Optional[str]:
    """
    Parse Accept-Language header met q-waarden.
    Bijv: "sv-SE,sv;q=0.9,en-US;q=0.8,en;q=0.7"
    """
    if not header:
        return None

    options = []
    for position, part in enumerate(header.split(",")):
        part = part.strip()
        if not part:
            continue

        if ";" in part:
            locale, *params = part.split(";")
            q = 1.0
            for param in params:
                match = Q_WEIGHT_PATTERN.search(param)
                if match:
                    try:
                        q = float(match.group(1))
                    except ValueError:
                        pass
        else:
            locale = part
            q = 1.0

        code = _normalize_lang(locale)
        if code and code in supported and q > 0:
            # bij gelijk gewicht wint de volgorde in de header
            options.append((-q, position, code))

    options.sort()

    return options[0][2] if options else None
