"""Rate limiting configuration for the public form endpoints."""

import os

from slowapi import Limiter
from slowapi.util import get_remote_address

from criticus.core.config import settings

IS_TESTING = os.getenv("TESTING", "").lower() in ("1", "true", "yes")

# In-memory storage: the site runs as a single process per instance
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri="memory://",
    enabled=not IS_TESTING and settings.RATE_LIMIT_FORMS > 0,
)


def form_submission_limit() -> str:
    """Per-client submission limit, read at request time."""
    return f"{max(settings.RATE_LIMIT_FORMS, 1)}/minute"
