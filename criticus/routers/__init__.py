"""API routers."""

from criticus.routers.admin import router as admin_router
from criticus.routers.landing import router as landing_router
from criticus.routers.submissions import router as submissions_router

__all__ = [
    "admin_router",
    "landing_router",
    "submissions_router",
]
