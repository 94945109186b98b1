"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from criticus.core.config import settings
from criticus.core.deps import get_store
from criticus.core.rate_limit import limiter
from criticus.core.structured_logging import build_log_context, configure_logging
from criticus.services.errors import SubmissionStoreError
from criticus.services.submission_store import SubmissionStore

logger = logging.getLogger(__name__)

# ============================================================================
# Sentry Integration (optional, for production error tracking)
# ============================================================================

if settings.SENTRY_DSN and settings.ENV != "dev":
    import sentry_sdk
    from sentry_sdk.integrations.fastapi import FastApiIntegration
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENV,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            SqlalchemyIntegration(),
        ],
        traces_sample_rate=0.1,
        send_default_pii=False,  # Submissions carry names and emails
    )
    logging.info("Sentry initialized for error tracking")

# ============================================================================
# Rate Limiting
# ============================================================================

from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded


# ============================================================================
# CORS
# ============================================================================

class PreflightCORSMiddleware(CORSMiddleware):
    """CORS with empty-bodied preflight replies, matching the form routes' OPTIONS."""

    def preflight_response(self, request_headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response
        headers = {
            key: value
            for key, value in response.headers.items()
            if key not in ("content-length", "content-type")
        }
        return Response(status_code=200, headers=headers)


# ============================================================================
# Lifespan: one storage handle per process
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    store = SubmissionStore.from_url(settings.DATABASE_URL)
    if settings.AUTO_CREATE_TABLES:
        store.create_all()
    app.state.store = store
    logger.info("Submission store opened (%s)", store.engine.url.get_backend_name())
    try:
        yield
    finally:
        store.close()
        logger.info("Submission store closed")


# ============================================================================
# Error Handlers
# ============================================================================

HTTP_ERROR_MESSAGES = {
    404: "Endpoint not found",
    405: "Method not allowed",
}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": ...} like the form endpoints do."""
    message = exc.detail
    if exc.status_code in HTTP_ERROR_MESSAGES and message in (None, "Not Found", "Method Not Allowed"):
        message = HTTP_ERROR_MESSAGES[exc.status_code]
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON bodies are a client error (400), not 422."""
    return JSONResponse(status_code=400, content={"error": "Request body must be valid JSON"})


def _server_error_body(exc: Exception) -> dict[str, str]:
    body = {"error": "Something went wrong!"}
    if settings.is_dev:
        body["details"] = str(exc)
    return body


async def store_error_handler(request: Request, exc: SubmissionStoreError) -> JSONResponse:
    logger.error(
        "Storage failure: %s",
        exc,
        extra=build_log_context(kind=exc.kind.value, route=request.url.path, method=request.method),
    )
    return JSONResponse(status_code=500, content=_server_error_body(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error",
        extra=build_log_context(route=request.url.path, method=request.method),
    )
    return JSONResponse(status_code=500, content=_server_error_body(exc))


# ============================================================================
# FastAPI App
# ============================================================================

def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Criticus AI API",
        description="Landing page and form submissions for Criticus AI",
        version=settings.VERSION,
        docs_url="/docs" if settings.is_dev else None,
        redoc_url="/redoc" if settings.is_dev else None,
        lifespan=lifespan,
    )

    # Add rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SubmissionStoreError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # CORS middleware - must be added before routers
    app.add_middleware(
        PreflightCORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # ========================================================================
    # Routers
    # ========================================================================

    from criticus.routers import admin, landing, submissions

    app.include_router(landing.router)
    app.include_router(submissions.router)
    app.include_router(admin.router)

    # ========================================================================
    # Health Check
    # ========================================================================

    @app.get("/health")
    def health(store: SubmissionStore = Depends(get_store)):
        """
        Health check endpoint.

        Verifies database connectivity and returns environment info.
        """
        store.ping()
        return {"status": "ok", "env": settings.ENV, "version": settings.VERSION}

    return app


app = create_app()
