import pytest
from httpx import AsyncClient

from criticus.core import rate_limit
from criticus.core.config import settings
from criticus.db.enums import FormKind


def test_limit_string_follows_settings(monkeypatch):
    monkeypatch.setattr(settings, "RATE_LIMIT_FORMS", 3)
    assert rate_limit.form_submission_limit() == "3/minute"


@pytest.mark.asyncio
async def test_form_endpoints_are_rate_limited(client: AsyncClient, payloads, monkeypatch):
    monkeypatch.setattr(settings, "RATE_LIMIT_FORMS", 2)
    monkeypatch.setattr(rate_limit.limiter, "enabled", True)
    rate_limit.limiter.reset()
    try:
        statuses = []
        for i in range(3):
            body = dict(payloads[FormKind.NEWSLETTER], email=f"reader{i}@example.com")
            statuses.append((await client.post("/api/newsletter", json=body)).status_code)
    finally:
        rate_limit.limiter.reset()

    assert statuses == [201, 201, 429]
