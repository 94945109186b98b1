"""
Admin read endpoints for submitted forms.

Protected by the X-Admin-Secret header. Rows come back newest first.
"""
from fastapi import APIRouter, Depends

from criticus.core.deps import get_store, require_admin
from criticus.db.enums import FormKind
from criticus.schemas.submissions import (
    CollaboratorApplicationRead,
    CollaboratorListResponse,
    DemoListResponse,
    DemoRequestRead,
    NewsletterListResponse,
    NewsletterSubscriptionRead,
    WaitlistListResponse,
    WaitlistSignupRead,
)
from criticus.services.submission_store import SubmissionStore


router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("/waitlist", response_model=WaitlistListResponse)
def list_waitlist_signups(store: SubmissionStore = Depends(get_store)):
    rows = store.list(FormKind.WAITLIST)
    return WaitlistListResponse(signups=[WaitlistSignupRead.model_validate(row) for row in rows])


@router.get("/demos", response_model=DemoListResponse)
def list_demo_requests(store: SubmissionStore = Depends(get_store)):
    rows = store.list(FormKind.DEMO)
    return DemoListResponse(requests=[DemoRequestRead.model_validate(row) for row in rows])


@router.get("/newsletter", response_model=NewsletterListResponse)
def list_newsletter_subscriptions(store: SubmissionStore = Depends(get_store)):
    rows = store.list(FormKind.NEWSLETTER)
    return NewsletterListResponse(
        subscriptions=[NewsletterSubscriptionRead.model_validate(row) for row in rows]
    )


@router.get("/collaborators", response_model=CollaboratorListResponse)
def list_collaborator_applications(store: SubmissionStore = Depends(get_store)):
    rows = store.list(FormKind.COLLABORATOR)
    return CollaboratorListResponse(
        applications=[CollaboratorApplicationRead.model_validate(row) for row in rows]
    )
