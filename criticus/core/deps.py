"""FastAPI dependencies for storage access and admin authorization."""

from fastapi import Header, HTTPException, Request

from criticus.core.config import settings
from criticus.core.security import verify_secret
from criticus.services.submission_store import SubmissionStore


ADMIN_SECRET_HEADER = "X-Admin-Secret"


def get_store(request: Request) -> SubmissionStore:
    """
    Submission store dependency.

    The store is opened by the application lifespan and lives on app.state.
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Submission store is not initialized")
    return store


def require_admin(x_admin_secret: str | None = Header(None)) -> None:
    """
    Gate the admin read surface behind the X-Admin-Secret header.

    Raises:
        HTTPException 501: ADMIN_SECRET not configured
        HTTPException 403: header missing or wrong
    """
    if not settings.ADMIN_SECRET:
        raise HTTPException(status_code=501, detail="ADMIN_SECRET not configured")
    if not verify_secret(x_admin_secret, settings.ADMIN_SECRET):
        raise HTTPException(status_code=403, detail="Invalid admin secret")
