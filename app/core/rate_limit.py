from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

# Uploads run the full analysis pipeline; only that route is throttled.
analyze_rate_limit = limiter.limit(settings.rate_limit)
