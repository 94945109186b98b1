"""Schemas for landing-page submissions.

Input models describe the JSON bodies the landing page posts (camelCase keys).
They only check structure: known keys, string values, column-sized lengths.
Business rules live in the submission validator.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from criticus.db.enums import FormKind
from criticus.db.models import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, WHY_COLLABORATE_MAX_LENGTH


class SubmissionInput(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
    )


class WaitlistSignupInput(SubmissionInput):
    name: str = Field(..., max_length=NAME_MAX_LENGTH)
    email: str = Field(..., max_length=EMAIL_MAX_LENGTH)
    university: str = Field(..., max_length=NAME_MAX_LENGTH)
    role: str = Field(..., max_length=50)
    how_heard_about_us: str = Field(..., max_length=50)


class DemoRequestInput(SubmissionInput):
    name: str = Field(..., max_length=NAME_MAX_LENGTH)
    email: str = Field(..., max_length=EMAIL_MAX_LENGTH)
    institution_type: str = Field(..., max_length=50)
    institution_name: str = Field(..., max_length=NAME_MAX_LENGTH)
    role: str = Field(..., max_length=50)


class NewsletterSubscriptionInput(SubmissionInput):
    name: str = Field(..., max_length=NAME_MAX_LENGTH)
    email: str = Field(..., max_length=EMAIL_MAX_LENGTH)


class CollaboratorApplicationInput(SubmissionInput):
    name: str = Field(..., max_length=NAME_MAX_LENGTH)
    email: str = Field(..., max_length=EMAIL_MAX_LENGTH)
    institution_type: str = Field(..., max_length=50)
    institution_name: str = Field(..., max_length=NAME_MAX_LENGTH)
    role: str = Field(..., max_length=NAME_MAX_LENGTH)
    why_collaborate: str = Field(..., max_length=WHY_COLLABORATE_MAX_LENGTH)


INPUT_MODEL_BY_KIND: dict[FormKind, type[SubmissionInput]] = {
    FormKind.WAITLIST: WaitlistSignupInput,
    FormKind.DEMO: DemoRequestInput,
    FormKind.NEWSLETTER: NewsletterSubscriptionInput,
    FormKind.COLLABORATOR: CollaboratorApplicationInput,
}


# =============================================================================
# Responses
# =============================================================================

class SubmissionCreated(BaseModel):
    success: bool = True
    message: str
    id: UUID


class ErrorResponse(BaseModel):
    error: str
    errors: dict[str, str] | None = None
    details: str | None = None


class WaitlistSignupRead(BaseModel):
    id: UUID
    name: str
    email: str
    university: str
    role: str
    how_heard_about_us: str
    created_at: datetime

    model_config = {"from_attributes": True}


class DemoRequestRead(BaseModel):
    id: UUID
    name: str
    email: str
    institution_type: str
    institution_name: str
    role: str
    created_at: datetime

    model_config = {"from_attributes": True}


class NewsletterSubscriptionRead(BaseModel):
    id: UUID
    name: str
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}


class CollaboratorApplicationRead(BaseModel):
    id: UUID
    name: str
    email: str
    institution_type: str
    institution_name: str
    role: str
    why_collaborate: str
    created_at: datetime

    model_config = {"from_attributes": True}


class WaitlistListResponse(BaseModel):
    signups: list[WaitlistSignupRead]


class DemoListResponse(BaseModel):
    requests: list[DemoRequestRead]


class NewsletterListResponse(BaseModel):
    subscriptions: list[NewsletterSubscriptionRead]


class CollaboratorListResponse(BaseModel):
    applications: list[CollaboratorApplicationRead]
