"""Pydantic schemas for API request/response models."""

from criticus.schemas.submissions import (
    CollaboratorApplicationInput,
    CollaboratorApplicationRead,
    DemoRequestInput,
    DemoRequestRead,
    ErrorResponse,
    NewsletterSubscriptionInput,
    NewsletterSubscriptionRead,
    SubmissionCreated,
    WaitlistSignupInput,
    WaitlistSignupRead,
)

__all__ = [
    "CollaboratorApplicationInput",
    "CollaboratorApplicationRead",
    "DemoRequestInput",
    "DemoRequestRead",
    "ErrorResponse",
    "NewsletterSubscriptionInput",
    "NewsletterSubscriptionRead",
    "SubmissionCreated",
    "WaitlistSignupInput",
    "WaitlistSignupRead",
]
