"""Submission validator - checks and normalizes landing-page form input.

validate_submission() never raises for bad input. It returns a
ValidationResult holding either a normalized record ready for the store
or a mapping of every failing field to a human-readable message.

Checks run in this order, all fields are checked:
1. Structure (known keys only, string values, column-sized lengths)
2. Presence (non-blank after trimming)
3. Email shape (local@domain.tld)
4. Enum membership (role, howHeardAboutUs, institutionType)
5. Demo role allowed for the chosen institution type
6. whyCollaborate word limit
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Union

from pydantic import ValidationError as PydanticValidationError

from criticus.db.enums import (
    DEMO_ROLES_BY_INSTITUTION,
    FormKind,
    InstitutionType,
    ReferralSource,
    WaitlistRole,
)
from criticus.schemas.submissions import INPUT_MODEL_BY_KIND
from criticus.utils.normalization import (
    count_words,
    is_valid_email,
    normalize_choice,
    normalize_email,
    normalize_text,
)


WHY_COLLABORATE_MAX_WORDS = 100

BODY_ERROR_KEY = "body"
BODY_NOT_OBJECT = "Request body must be a JSON object"

REQUIRED_FIELDS: dict[FormKind, tuple[str, ...]] = {
    FormKind.WAITLIST: ("name", "email", "university", "role", "howHeardAboutUs"),
    FormKind.DEMO: ("name", "email", "institutionType", "institutionName", "role"),
    FormKind.NEWSLETTER: ("name", "email"),
    FormKind.COLLABORATOR: (
        "name",
        "email",
        "institutionType",
        "institutionName",
        "role",
        "whyCollaborate",
    ),
}

REQUIRED_MESSAGES = {
    "name": "Name is required",
    "email": "Email is required",
    "university": "University or institution is required",
    "role": "Please select your role",
    "howHeardAboutUs": "Please tell us how you heard about us",
    "institutionType": "Please select an institution type",
    "institutionName": "Institution name is required",
    "whyCollaborate": "Please tell us why you want to collaborate",
}

# Collaborator role is free text, not a select
REQUIRED_MESSAGE_OVERRIDES = {
    (FormKind.COLLABORATOR, "role"): "Role is required",
}

INVALID_EMAIL = "Please enter a valid email address"
INVALID_WAITLIST_ROLE = "Invalid role. Must be student, professor, administrator, or other"
INVALID_REFERRAL_SOURCE = (
    "Invalid source. Must be social media, word of mouth, academic conference, or other"
)
INVALID_INSTITUTION_TYPE = (
    "Invalid institution type. Must be high-school, community-college, or university"
)
WHY_COLLABORATE_TOO_LONG = f"Why collaborate section must be {WHY_COLLABORATE_MAX_WORDS} words or less"


# =============================================================================
# Normalized records
# =============================================================================

@dataclass(frozen=True)
class WaitlistSignupRecord:
    kind: ClassVar[FormKind] = FormKind.WAITLIST

    name: str
    email: str
    university: str
    role: str
    how_heard_about_us: str

    def to_row(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class DemoRequestRecord:
    kind: ClassVar[FormKind] = FormKind.DEMO

    name: str
    email: str
    institution_type: str
    institution_name: str
    role: str

    def to_row(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class NewsletterSubscriptionRecord:
    kind: ClassVar[FormKind] = FormKind.NEWSLETTER

    name: str
    email: str

    def to_row(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class CollaboratorApplicationRecord:
    kind: ClassVar[FormKind] = FormKind.COLLABORATOR

    name: str
    email: str
    institution_type: str
    institution_name: str
    role: str
    why_collaborate: str

    def to_row(self) -> dict[str, str]:
        return asdict(self)


SubmissionRecord = Union[
    WaitlistSignupRecord,
    DemoRequestRecord,
    NewsletterSubscriptionRecord,
    CollaboratorApplicationRecord,
]


@dataclass(frozen=True)
class ValidationResult:
    record: SubmissionRecord | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.record is not None and not self.errors

    def summary(self) -> str:
        """One-line message for clients that only display a single error."""
        return "; ".join(self.errors.values())


# =============================================================================
# Validation
# =============================================================================

def validate_submission(kind: FormKind | str, raw: Any) -> ValidationResult:
    """Validate a raw JSON body for a form kind and normalize it."""
    kind = FormKind(kind)
    if not isinstance(raw, Mapping):
        return ValidationResult(errors={BODY_ERROR_KEY: BODY_NOT_OBJECT})

    errors = _structural_errors(kind, raw)
    values = {
        name: normalize_text(raw.get(name)) if isinstance(raw.get(name), str) else ""
        for name in REQUIRED_FIELDS[kind]
    }

    for name in REQUIRED_FIELDS[kind]:
        if name not in errors and not values[name]:
            errors[name] = REQUIRED_MESSAGE_OVERRIDES.get((kind, name), REQUIRED_MESSAGES[name])

    def passes(name: str) -> bool:
        return name not in errors

    if passes("email") and not is_valid_email(values["email"]):
        errors["email"] = INVALID_EMAIL

    if kind == FormKind.WAITLIST:
        if passes("role"):
            role = normalize_choice(values["role"])
            if WaitlistRole.has_value(role):
                values["role"] = role
            else:
                errors["role"] = INVALID_WAITLIST_ROLE
        if passes("howHeardAboutUs"):
            source = normalize_choice(values["howHeardAboutUs"])
            if ReferralSource.has_value(source):
                values["howHeardAboutUs"] = source
            else:
                errors["howHeardAboutUs"] = INVALID_REFERRAL_SOURCE

    if kind in (FormKind.DEMO, FormKind.COLLABORATOR):
        if passes("institutionType") and not InstitutionType.has_value(values["institutionType"]):
            errors["institutionType"] = INVALID_INSTITUTION_TYPE

    if kind == FormKind.DEMO and passes("institutionType") and passes("role"):
        institution_type = InstitutionType(values["institutionType"])
        allowed = [role.value for role in DEMO_ROLES_BY_INSTITUTION[institution_type]]
        if values["role"] not in allowed:
            errors["role"] = (
                f"Invalid role for {values['institutionType']}. Must be one of: {', '.join(allowed)}"
            )

    if kind == FormKind.COLLABORATOR and passes("whyCollaborate"):
        if count_words(values["whyCollaborate"]) > WHY_COLLABORATE_MAX_WORDS:
            errors["whyCollaborate"] = WHY_COLLABORATE_TOO_LONG

    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(record=_build_record(kind, values))


def _structural_errors(kind: FormKind, raw: Mapping) -> dict[str, str]:
    """Run the input schema and translate its errors to per-field messages."""
    try:
        INPUT_MODEL_BY_KIND[kind].model_validate(dict(raw))
    except PydanticValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            name = str(error["loc"][0]) if error["loc"] else BODY_ERROR_KEY
            if name in errors:
                continue
            errors[name] = _structural_message(kind, name, error)
        return errors
    return {}


def _structural_message(kind: FormKind, name: str, error: Mapping[str, Any]) -> str:
    error_type = error["type"]
    if error_type == "missing":
        default = REQUIRED_MESSAGES.get(name, "Field is required")
        return REQUIRED_MESSAGE_OVERRIDES.get((kind, name), default)
    if error_type == "extra_forbidden":
        return "Unknown field"
    if error_type == "string_type":
        return "Must be a string"
    if error_type == "string_too_long":
        return f"Must be at most {error['ctx']['max_length']} characters"
    return error["msg"]


def _build_record(kind: FormKind, values: dict[str, str]) -> SubmissionRecord:
    name = values["name"]
    email = normalize_email(values["email"])

    if kind == FormKind.WAITLIST:
        return WaitlistSignupRecord(
            name=name,
            email=email,
            university=values["university"],
            role=values["role"],
            how_heard_about_us=values["howHeardAboutUs"],
        )
    if kind == FormKind.DEMO:
        return DemoRequestRecord(
            name=name,
            email=email,
            institution_type=values["institutionType"],
            institution_name=values["institutionName"],
            role=values["role"],
        )
    if kind == FormKind.NEWSLETTER:
        return NewsletterSubscriptionRecord(name=name, email=email)
    return CollaboratorApplicationRecord(
        name=name,
        email=email,
        institution_type=values["institutionType"],
        institution_name=values["institutionName"],
        role=values["role"],
        why_collaborate=values["whyCollaborate"],
    )
