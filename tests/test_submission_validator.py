"""Tests for the submission validator (pure, no database)."""

import pytest

from criticus.db.enums import FormKind
from criticus.services.submission_validator import (
    BODY_NOT_OBJECT,
    REQUIRED_FIELDS,
    CollaboratorApplicationRecord,
    DemoRequestRecord,
    NewsletterSubscriptionRecord,
    WaitlistSignupRecord,
    validate_submission,
)


# =============================================================================
# Presence
# =============================================================================

@pytest.mark.parametrize("kind", list(FormKind))
def test_each_blank_required_field_is_reported(kind, payloads):
    for field in REQUIRED_FIELDS[kind]:
        body = dict(payloads[kind])
        body[field] = "   "

        result = validate_submission(kind, body)

        assert not result.ok
        assert result.record is None
        assert field in result.errors, f"{kind.value}: blank {field} not reported"


@pytest.mark.parametrize("kind", list(FormKind))
def test_missing_keys_report_the_same_message_as_blank(kind, payloads):
    blank = dict(payloads[kind], name="")
    missing = {k: v for k, v in payloads[kind].items() if k != "name"}

    assert validate_submission(kind, blank).errors["name"] == "Name is required"
    assert validate_submission(kind, missing).errors["name"] == "Name is required"


def test_empty_body_reports_every_required_field():
    result = validate_submission(FormKind.WAITLIST, {})

    assert set(result.errors) == set(REQUIRED_FIELDS[FormKind.WAITLIST])
    assert result.errors["howHeardAboutUs"] == "Please tell us how you heard about us"


def test_collaborator_role_is_free_text_message(payloads):
    body = dict(payloads[FormKind.COLLABORATOR], role="")
    assert validate_submission(FormKind.COLLABORATOR, body).errors["role"] == "Role is required"


# =============================================================================
# Structure
# =============================================================================

@pytest.mark.parametrize("raw", [None, [], "name=ada", 42])
def test_non_object_body_is_rejected(raw):
    result = validate_submission(FormKind.NEWSLETTER, raw)
    assert result.errors == {"body": BODY_NOT_OBJECT}


def test_unknown_fields_are_rejected(payloads):
    body = dict(payloads[FormKind.NEWSLETTER], isAdmin="true")

    result = validate_submission(FormKind.NEWSLETTER, body)

    assert result.errors == {"isAdmin": "Unknown field"}


def test_snake_case_keys_are_unknown(payloads):
    body = dict(payloads[FormKind.WAITLIST])
    body["how_heard_about_us"] = body.pop("howHeardAboutUs")

    result = validate_submission(FormKind.WAITLIST, body)

    assert result.errors["how_heard_about_us"] == "Unknown field"
    assert result.errors["howHeardAboutUs"] == "Please tell us how you heard about us"


def test_non_string_values_are_rejected(payloads):
    body = dict(payloads[FormKind.NEWSLETTER], name=123)

    result = validate_submission(FormKind.NEWSLETTER, body)

    assert result.errors == {"name": "Must be a string"}


def test_oversized_values_are_rejected(payloads):
    body = dict(payloads[FormKind.NEWSLETTER], name="x" * 256)

    result = validate_submission(FormKind.NEWSLETTER, body)

    assert result.errors == {"name": "Must be at most 255 characters"}


def test_all_failing_fields_are_reported_together(payloads):
    body = dict(payloads[FormKind.WAITLIST], email="nope", role="dean", howHeardAboutUs="radio")

    result = validate_submission(FormKind.WAITLIST, body)

    assert set(result.errors) == {"email", "role", "howHeardAboutUs"}
    assert "Please enter a valid email address" in result.summary()


# =============================================================================
# Email
# =============================================================================

@pytest.mark.parametrize("email", ["a@b.co", "a@b.c", "First.Last@Sub.Example.EDU"])
def test_accepts_valid_emails(email, payloads):
    body = dict(payloads[FormKind.NEWSLETTER], email=email)
    assert validate_submission(FormKind.NEWSLETTER, body).ok


@pytest.mark.parametrize("email", ["foo@bar", "not-an-email", "a b@c.d", "a@@b.c", "@b.co"])
def test_rejects_invalid_emails(email, payloads):
    body = dict(payloads[FormKind.NEWSLETTER], email=email)

    result = validate_submission(FormKind.NEWSLETTER, body)

    assert result.errors == {"email": "Please enter a valid email address"}


def test_email_is_trimmed_and_lowercased(payloads):
    body = dict(payloads[FormKind.NEWSLETTER], email="  Alan@Example.COM ")

    result = validate_submission(FormKind.NEWSLETTER, body)

    assert result.record.email == "alan@example.com"


# =============================================================================
# Waitlist enums
# =============================================================================

@pytest.mark.parametrize("role", ["student", "professor", "administrator", "other"])
def test_waitlist_accepts_all_roles(role, payloads):
    body = dict(payloads[FormKind.WAITLIST], role=role)
    assert validate_submission(FormKind.WAITLIST, body).record.role == role


@pytest.mark.parametrize("posted,stored", [("Student", "student"), (" PROFESSOR ", "professor")])
def test_waitlist_role_is_case_insensitive(posted, stored, payloads):
    body = dict(payloads[FormKind.WAITLIST], role=posted)

    result = validate_submission(FormKind.WAITLIST, body)

    assert result.record.role == stored


def test_waitlist_rejects_unknown_role(payloads):
    body = dict(payloads[FormKind.WAITLIST], role="dean")

    result = validate_submission(FormKind.WAITLIST, body)

    assert result.errors["role"].startswith("Invalid role")


@pytest.mark.parametrize(
    "posted,stored",
    [
        ("social media", "social media"),
        ("social-media", "social media"),
        ("word-of-mouth", "word of mouth"),
        ("Academic Conference", "academic conference"),
        ("other", "other"),
    ],
)
def test_waitlist_referral_source_is_canonicalized(posted, stored, payloads):
    body = dict(payloads[FormKind.WAITLIST], howHeardAboutUs=posted)

    result = validate_submission(FormKind.WAITLIST, body)

    assert result.record.how_heard_about_us == stored


def test_waitlist_rejects_unknown_referral_source(payloads):
    body = dict(payloads[FormKind.WAITLIST], howHeardAboutUs="billboard")

    result = validate_submission(FormKind.WAITLIST, body)

    assert result.errors["howHeardAboutUs"].startswith("Invalid source")


# =============================================================================
# Demo requests
# =============================================================================

def test_demo_role_must_match_institution_type(payloads):
    body = dict(
        payloads[FormKind.DEMO],
        institutionType="high-school",
        role="university-professor",
    )

    result = validate_submission(FormKind.DEMO, body)

    assert result.errors == {
        "role": "Invalid role for high-school. Must be one of: "
        "high-school-teacher, high-school-administrator"
    }


def test_demo_matching_role_is_accepted(payloads):
    body = dict(payloads[FormKind.DEMO], institutionType="high-school", role="high-school-teacher")

    result = validate_submission(FormKind.DEMO, body)

    assert result.ok
    assert result.record == DemoRequestRecord(
        name="Grace Hopper",
        email="grace@example.edu",
        institution_type="high-school",
        institution_name="Yale",
        role="high-school-teacher",
    )


def test_demo_invalid_institution_type_skips_role_check(payloads):
    body = dict(payloads[FormKind.DEMO], institutionType="kindergarten")

    result = validate_submission(FormKind.DEMO, body)

    assert set(result.errors) == {"institutionType"}


# =============================================================================
# Collaborator applications
# =============================================================================

def test_why_collaborate_allows_exactly_100_words(payloads):
    text = " ".join(f"word{i}" for i in range(100))
    body = dict(payloads[FormKind.COLLABORATOR], whyCollaborate=text)

    assert validate_submission(FormKind.COLLABORATOR, body).ok


def test_why_collaborate_rejects_101_words(payloads):
    text = " ".join(f"word{i}" for i in range(101))
    body = dict(payloads[FormKind.COLLABORATOR], whyCollaborate=text)

    result = validate_submission(FormKind.COLLABORATOR, body)

    assert result.errors == {"whyCollaborate": "Why collaborate section must be 100 words or less"}


def test_why_collaborate_ignores_extra_whitespace(payloads):
    text = "\n  " + "  \t ".join(["word"] * 100) + "   "
    body = dict(payloads[FormKind.COLLABORATOR], whyCollaborate=text)

    assert validate_submission(FormKind.COLLABORATOR, body).ok


def test_collaborator_institution_type_is_checked(payloads):
    body = dict(payloads[FormKind.COLLABORATOR], institutionType="bootcamp")

    result = validate_submission(FormKind.COLLABORATOR, body)

    assert result.errors["institutionType"].startswith("Invalid institution type")


# =============================================================================
# Normalized output
# =============================================================================

def test_records_are_trimmed_and_typed(payloads):
    body = {k: f"  {v}  " for k, v in payloads[FormKind.WAITLIST].items()}

    result = validate_submission("waitlist", body)

    assert result.record == WaitlistSignupRecord(
        name="Ada Lovelace",
        email="ada@example.edu",
        university="University of London",
        role="student",
        how_heard_about_us="social media",
    )
    assert result.record.to_row()["how_heard_about_us"] == "social media"


def test_record_types_per_kind(payloads):
    assert isinstance(
        validate_submission(FormKind.NEWSLETTER, payloads[FormKind.NEWSLETTER]).record,
        NewsletterSubscriptionRecord,
    )
    assert isinstance(
        validate_submission(FormKind.COLLABORATOR, payloads[FormKind.COLLABORATOR]).record,
        CollaboratorApplicationRecord,
    )
