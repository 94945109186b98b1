"""Create submission tables.

Revision ID: 0001_submission_tables
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001_submission_tables"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


INSTITUTION_TYPES = "'high-school', 'community-college', 'university'"


def upgrade() -> None:
    """Create one table per landing-page form."""
    op.create_table(
        "waitlist_signups",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("university", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("how_heard_about_us", sa.String(length=30), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("email", name="uq_waitlist_signups_email"),
        sa.CheckConstraint(
            "role IN ('student', 'professor', 'administrator', 'other')",
            name="ck_waitlist_signups_role",
        ),
        sa.CheckConstraint(
            "how_heard_about_us IN ('social media', 'word of mouth', 'academic conference', 'other')",
            name="ck_waitlist_signups_how_heard_about_us",
        ),
    )
    op.create_index("idx_waitlist_signups_created_at", "waitlist_signups", ["created_at"])

    op.create_table(
        "demo_requests",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("institution_type", sa.String(length=30), nullable=False),
        sa.Column("institution_name", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            f"institution_type IN ({INSTITUTION_TYPES})",
            name="ck_demo_requests_institution_type",
        ),
    )
    op.create_index("idx_demo_requests_created_at", "demo_requests", ["created_at"])

    op.create_table(
        "newsletter_subscriptions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("email", name="uq_newsletter_subscriptions_email"),
    )
    op.create_index(
        "idx_newsletter_subscriptions_created_at", "newsletter_subscriptions", ["created_at"]
    )

    op.create_table(
        "collaborator_applications",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("institution_type", sa.String(length=30), nullable=False),
        sa.Column("institution_name", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=255), nullable=False),
        sa.Column("why_collaborate", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("email", name="uq_collaborator_applications_email"),
        sa.CheckConstraint(
            f"institution_type IN ({INSTITUTION_TYPES})",
            name="ck_collaborator_applications_institution_type",
        ),
    )
    op.create_index(
        "idx_collaborator_applications_created_at", "collaborator_applications", ["created_at"]
    )


def downgrade() -> None:
    """Drop submission tables."""
    op.drop_index("idx_collaborator_applications_created_at", table_name="collaborator_applications")
    op.drop_table("collaborator_applications")
    op.drop_index("idx_newsletter_subscriptions_created_at", table_name="newsletter_subscriptions")
    op.drop_table("newsletter_subscriptions")
    op.drop_index("idx_demo_requests_created_at", table_name="demo_requests")
    op.drop_table("demo_requests")
    op.drop_index("idx_waitlist_signups_created_at", table_name="waitlist_signups")
    op.drop_table("waitlist_signups")
