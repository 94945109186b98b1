"""Shared-secret checks for operator endpoints."""

import secrets


def verify_secret(provided: str | None, expected: str | None) -> bool:
    """Constant-time comparison that treats empty values as a mismatch."""
    if not provided or not expected:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))
