"""SQLAlchemy ORM models for landing-page submissions.

One table per form. Rows are written once and never updated.
"""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, Index, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from criticus.db.base import Base
from criticus.db.enums import (
    FormKind,
    InstitutionType,
    ReferralSource,
    WaitlistRole,
    sql_in_list,
)


NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 320
WHY_COLLABORATE_MAX_LENGTH = 5000


class WaitlistSignup(Base):
    __tablename__ = "waitlist_signups"
    __table_args__ = (
        UniqueConstraint("email", name="uq_waitlist_signups_email"),
        CheckConstraint(f"role IN ({sql_in_list(WaitlistRole)})", name="ck_waitlist_signups_role"),
        CheckConstraint(
            f"how_heard_about_us IN ({sql_in_list(ReferralSource)})",
            name="ck_waitlist_signups_how_heard_about_us",
        ),
        Index("idx_waitlist_signups_created_at", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), nullable=False)
    university: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    how_heard_about_us: Mapped[str] = mapped_column(String(30), nullable=False)
    created_at: Mapped[datetime] = mapped_column(nullable=False)


class DemoRequest(Base):
    """Demo requests. No uniqueness: the same person may ask more than once."""

    __tablename__ = "demo_requests"
    __table_args__ = (
        CheckConstraint(
            f"institution_type IN ({sql_in_list(InstitutionType)})",
            name="ck_demo_requests_institution_type",
        ),
        Index("idx_demo_requests_created_at", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), nullable=False)
    institution_type: Mapped[str] = mapped_column(String(30), nullable=False)
    institution_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(nullable=False)


class NewsletterSubscription(Base):
    __tablename__ = "newsletter_subscriptions"
    __table_args__ = (
        UniqueConstraint("email", name="uq_newsletter_subscriptions_email"),
        Index("idx_newsletter_subscriptions_created_at", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), nullable=False)
    created_at: Mapped[datetime] = mapped_column(nullable=False)


class CollaboratorApplication(Base):
    __tablename__ = "collaborator_applications"
    __table_args__ = (
        UniqueConstraint("email", name="uq_collaborator_applications_email"),
        CheckConstraint(
            f"institution_type IN ({sql_in_list(InstitutionType)})",
            name="ck_collaborator_applications_institution_type",
        ),
        Index("idx_collaborator_applications_created_at", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), nullable=False)
    institution_type: Mapped[str] = mapped_column(String(30), nullable=False)
    institution_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    role: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    why_collaborate: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(nullable=False)


MODEL_BY_KIND: dict[FormKind, type[Base]] = {
    FormKind.WAITLIST: WaitlistSignup,
    FormKind.DEMO: DemoRequest,
    FormKind.NEWSLETTER: NewsletterSubscription,
    FormKind.COLLABORATOR: CollaboratorApplication,
}
