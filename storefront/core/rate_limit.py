# storefront/core/rate_limit.py
from slowapi import Limiter
from slowapi.util import get_remote_address

from storefront.config import settings

# 1 gedeelde Limiter voor de hele app
limiter = Limiter(key_func=get_remote_address, default_limits=[])

public_limit = settings.rate_limit_public
