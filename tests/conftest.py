"""
Test configuration and fixtures.

Provides:
- A SubmissionStore on a per-test SQLite file
- HTTPX AsyncClient wired to the app with the store injected
- Valid request bodies for each form
"""
import os
from typing import AsyncGenerator, Generator

import pytest
from httpx import AsyncClient, ASGITransport

# Disable rate limiting before the limiter is built
os.environ["TESTING"] = "1"

from criticus.main import app
from criticus.core.config import settings
from criticus.core.deps import get_store
from criticus.db.enums import FormKind
from criticus.services.submission_store import SubmissionStore


# =============================================================================
# Storage Fixtures
# =============================================================================

@pytest.fixture(scope="function")
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'criticus-test.db'}"


@pytest.fixture(scope="function")
def store(database_url: str) -> Generator[SubmissionStore, None, None]:
    """Fresh store with all tables created; disposed after the test."""
    store = SubmissionStore.from_url(database_url)
    store.create_all()
    yield store
    store.close()


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest.fixture(scope="function")
async def client(store: SubmissionStore) -> AsyncGenerator[AsyncClient, None]:
    """
    Create AsyncClient for the public endpoints.
    """
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def admin_secret(monkeypatch) -> str:
    secret = "test-admin-secret"
    monkeypatch.setattr(settings, "ADMIN_SECRET", secret)
    return secret


# =============================================================================
# Payloads
# =============================================================================

@pytest.fixture(scope="function")
def payloads() -> dict[FormKind, dict]:
    """Valid camelCase request bodies, one per form. Fresh copy per test."""
    return {
        FormKind.WAITLIST: {
            "name": "Ada Lovelace",
            "email": "ada@example.edu",
            "university": "University of London",
            "role": "student",
            "howHeardAboutUs": "social media",
        },
        FormKind.DEMO: {
            "name": "Grace Hopper",
            "email": "grace@example.edu",
            "institutionType": "university",
            "institutionName": "Yale",
            "role": "university-professor",
        },
        FormKind.NEWSLETTER: {
            "name": "Alan Turing",
            "email": "alan@example.com",
        },
        FormKind.COLLABORATOR: {
            "name": "Katherine Johnson",
            "email": "katherine@example.edu",
            "institutionType": "community-college",
            "institutionName": "West Virginia State",
            "role": "Math instructor",
            "whyCollaborate": "I want my students to learn to question answers, not just find them.",
        },
    }
