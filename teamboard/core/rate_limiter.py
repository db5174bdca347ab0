"""Shared slowapi rate limiter.

``main`` attaches it to ``app.state.limiter``; the auth router applies
per-route limits with ``@limiter.limit()``.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from teamboard.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri="memory://",
    enabled=settings.RATE_LIMIT_ENABLED,
)
