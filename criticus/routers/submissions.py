"""Public form endpoints for the landing page.

POST /api/waitlist, /api/demo, /api/newsletter, /api/collaborators.
Each one validates the JSON body, stores the normalized record and
answers 201 / 400 / 409 / 500.
"""

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response
from fastapi.responses import JSONResponse

from criticus.core.config import settings
from criticus.core.deps import get_store
from criticus.core.rate_limit import form_submission_limit, limiter
from criticus.core.structured_logging import build_log_context
from criticus.db.enums import FormKind
from criticus.schemas.submissions import ErrorResponse, SubmissionCreated
from criticus.services.errors import DuplicateKey, StorageUnavailable
from criticus.services.submission_store import SubmissionStore
from criticus.services.submission_validator import validate_submission

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["submissions"])


@dataclass(frozen=True)
class FormMessages:
    created: str
    conflict: str
    failure: str


FORM_MESSAGES: dict[FormKind, FormMessages] = {
    FormKind.WAITLIST: FormMessages(
        created="Successfully added to waitlist!",
        conflict="This email is already on our waitlist!",
        failure="Failed to add to waitlist",
    ),
    # Demo requests have no email uniqueness; a conflict means a reused id
    FormKind.DEMO: FormMessages(
        created="Demo request submitted successfully!",
        conflict="Failed to submit demo request",
        failure="Failed to submit demo request",
    ),
    FormKind.NEWSLETTER: FormMessages(
        created="Newsletter subscription successful!",
        conflict="This email is already subscribed to our newsletter!",
        failure="Failed to subscribe to newsletter",
    ),
    FormKind.COLLABORATOR: FormMessages(
        created="Collaborator application submitted successfully!",
        conflict="Email already has a pending collaborator application",
        failure="Failed to submit collaborator application",
    ),
}

FORM_PATHS: dict[FormKind, str] = {
    FormKind.WAITLIST: "/waitlist",
    FormKind.DEMO: "/demo",
    FormKind.NEWSLETTER: "/newsletter",
    FormKind.COLLABORATOR: "/collaborators",
}

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

SUBMISSION_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation failed"},
    409: {"model": ErrorResponse, "description": "Email already submitted"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}


def failure_body(message: str, exc: Exception) -> dict[str, str]:
    """500 body; error detail only in dev."""
    body = {"error": message}
    if settings.is_dev:
        body["details"] = str(exc)
    return body


def handle_submission(
    request: Request,
    kind: FormKind,
    payload: Any,
    store: SubmissionStore,
) -> JSONResponse:
    messages = FORM_MESSAGES[kind]
    route = request.url.path

    result = validate_submission(kind, payload)
    if not result.ok:
        logger.info(
            "Rejected %s submission",
            kind.value,
            extra=build_log_context(kind=kind.value, route=route, fields=list(result.errors)),
        )
        return JSONResponse(
            status_code=400,
            content={"error": result.summary(), "errors": result.errors},
        )

    try:
        submission_id = store.insert(kind, result.record)
    except DuplicateKey as exc:
        logger.info(
            "Duplicate %s on %s submission",
            exc.field,
            kind.value,
            extra=build_log_context(kind=kind.value, route=route),
        )
        return JSONResponse(status_code=409, content={"error": messages.conflict})
    except StorageUnavailable as exc:
        logger.exception(
            "Failed to store %s submission",
            kind.value,
            extra=build_log_context(kind=kind.value, route=route),
        )
        return JSONResponse(status_code=500, content=failure_body(messages.failure, exc))

    logger.info(
        "Accepted %s submission",
        kind.value,
        extra=build_log_context(kind=kind.value, route=route, submission_id=str(submission_id)),
    )
    created = SubmissionCreated(message=messages.created, id=submission_id)
    return JSONResponse(status_code=201, content=created.model_dump(mode="json"))


@router.post(
    "/waitlist",
    status_code=201,
    response_model=SubmissionCreated,
    responses=SUBMISSION_RESPONSES,
)
@limiter.limit(form_submission_limit)
def submit_waitlist(
    request: Request,
    payload: Any = Body(None),
    store: SubmissionStore = Depends(get_store),
):
    """Join the waitlist. One signup per email."""
    return handle_submission(request, FormKind.WAITLIST, payload, store)


@router.post(
    "/demo",
    status_code=201,
    response_model=SubmissionCreated,
    responses=SUBMISSION_RESPONSES,
)
@limiter.limit(form_submission_limit)
def submit_demo_request(
    request: Request,
    payload: Any = Body(None),
    store: SubmissionStore = Depends(get_store),
):
    """Request a demo. The role must match the institution type."""
    return handle_submission(request, FormKind.DEMO, payload, store)


@router.post(
    "/newsletter",
    status_code=201,
    response_model=SubmissionCreated,
    responses=SUBMISSION_RESPONSES,
)
@limiter.limit(form_submission_limit)
def subscribe_newsletter(
    request: Request,
    payload: Any = Body(None),
    store: SubmissionStore = Depends(get_store),
):
    return handle_submission(request, FormKind.NEWSLETTER, payload, store)


@router.post(
    "/collaborators",
    status_code=201,
    response_model=SubmissionCreated,
    responses=SUBMISSION_RESPONSES,
)
@limiter.limit(form_submission_limit)
def apply_as_collaborator(
    request: Request,
    payload: Any = Body(None),
    store: SubmissionStore = Depends(get_store),
):
    """Apply to collaborate. whyCollaborate is capped at 100 words."""
    return handle_submission(request, FormKind.COLLABORATOR, payload, store)


def preflight() -> Response:
    """CORS preflight: 200, no body."""
    return Response(status_code=200, headers=PREFLIGHT_HEADERS)


for _path in FORM_PATHS.values():
    router.add_api_route(_path, preflight, methods=["OPTIONS"], include_in_schema=False)
