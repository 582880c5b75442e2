"""Initial portfolio schema: accounts, binary assets, content and analytics tables.

Revision ID: 20250301000000
Revises:
Create Date: 2025-03-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "20250301000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSONType = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    ]


def _singleton_key() -> sa.Column:
    return sa.Column("singleton_key", sa.String(length=32), nullable=False, unique=True)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=254), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=50), nullable=True),
        sa.Column("last_name", sa.String(length=50), nullable=True),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="user"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("failed_login_attempts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("lock_until", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_created_at"), "users", ["created_at"])

    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=False),
        sa.Column("technologies", JSONType, nullable=False),
        sa.Column("github", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("live", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "image",
            sa.String(length=1024),
            nullable=False,
            server_default="/api/placeholder/400/250",
        ),
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="active"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_projects_featured"), "projects", ["featured"])
    op.create_index(op.f("ix_projects_image"), "projects", ["image"])
    op.create_index(op.f("ix_projects_status"), "projects", ["status"])
    op.create_index(op.f("ix_projects_created_at"), "projects", ["created_at"])

    op.create_table(
        "images",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("filename", sa.String(length=512), nullable=False),
        sa.Column("original_name", sa.String(length=255), nullable=False),
        sa.Column("mime_type", sa.String(length=64), nullable=False),
        sa.Column("size", sa.Integer(), nullable=False),
        sa.Column("data", sa.LargeBinary(), nullable=False),
        sa.Column("uploaded_by", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column(
            "project_id",
            sa.Integer(),
            sa.ForeignKey("projects.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_images_uploaded_by"), "images", ["uploaded_by"])
    op.create_index(op.f("ix_images_project_id"), "images", ["project_id"])
    op.create_index(op.f("ix_images_is_active"), "images", ["is_active"])
    op.create_index(op.f("ix_images_created_at"), "images", ["created_at"])

    op.create_table(
        "resumes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("filename", sa.String(length=255), nullable=False),
        sa.Column("original_name", sa.String(length=255), nullable=False),
        sa.Column("mime_type", sa.String(length=64), nullable=False),
        sa.Column("size", sa.Integer(), nullable=False),
        sa.Column("data", sa.LargeBinary(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "upload_date",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_resumes_is_active"), "resumes", ["is_active"])
    op.create_index(op.f("ix_resumes_created_at"), "resumes", ["created_at"])

    op.create_table(
        "skills",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("category", sa.String(length=50), nullable=False),
        sa.Column("skills", JSONType, nullable=False),
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("additional_technologies", JSONType, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_skills_category"), "skills", ["category"])
    op.create_index(op.f("ix_skills_is_active"), "skills", ["is_active"])
    op.create_index(op.f("ix_skills_created_at"), "skills", ["created_at"])

    op.create_table(
        "contacts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=254), nullable=False),
        sa.Column("subject", sa.String(length=100), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="unread"),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        sa.Column("user_agent", sa.String(length=512), nullable=True),
        sa.Column("replied_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("reply_message", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_contacts_email"), "contacts", ["email"])
    op.create_index(op.f("ix_contacts_status"), "contacts", ["status"])
    op.create_index(op.f("ix_contacts_created_at"), "contacts", ["created_at"])

    op.create_table(
        "portfolio_views",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("ip_address", sa.String(length=64), nullable=False),
        sa.Column("user_agent", sa.String(length=512), nullable=False, server_default=""),
        sa.Column("referrer", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("page", sa.String(length=255), nullable=False, server_default="home"),
        sa.Column("session_id", sa.String(length=255), nullable=False),
        sa.Column(
            "timestamp",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("is_unique", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_portfolio_views_session_id"), "portfolio_views", ["session_id"])
    op.create_index(op.f("ix_portfolio_views_timestamp"), "portfolio_views", ["timestamp"])
    op.create_index(
        "ix_portfolio_views_ip_timestamp", "portfolio_views", ["ip_address", "timestamp"]
    )

    op.create_table(
        "about",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        _singleton_key(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("subtitle", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("email", sa.String(length=254), nullable=False),
        sa.Column("location", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("github", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("linkedin", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("twitter", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("website", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("avatar", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("about_text", sa.Text(), nullable=False),
        sa.Column("about_section_title", sa.String(length=255), nullable=False),
        sa.Column("about_highlights", JSONType, nullable=False),
        sa.Column("experience", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("education", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("technology_tags", JSONType, nullable=False),
        sa.Column("projects_completed", sa.String(length=32), nullable=False),
        sa.Column("years_experience", sa.String(length=32), nullable=False),
        sa.Column("technologies", sa.String(length=32), nullable=False),
        sa.Column("certifications", sa.String(length=32), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_about_created_at"), "about", ["created_at"])

    op.create_table(
        "footer",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        _singleton_key(),
        sa.Column("copyright", sa.String(length=255), nullable=False),
        sa.Column("tagline", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("social_links", JSONType, nullable=False),
        sa.Column("quick_links", JSONType, nullable=False),
        sa.Column("contact_info", JSONType, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_footer_created_at"), "footer", ["created_at"])

    op.create_table(
        "contact_settings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        _singleton_key(),
        sa.Column("email", sa.String(length=254), nullable=False),
        sa.Column("phone", sa.String(length=64), nullable=False, server_default=""),
        sa.Column("address", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("city", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("country", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("contact_title", sa.String(length=255), nullable=False),
        sa.Column("contact_subtitle", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("contact_description", sa.Text(), nullable=False, server_default=""),
        sa.Column("form_enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("auto_reply_enabled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("auto_reply_message", sa.Text(), nullable=False, server_default=""),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_contact_settings_created_at"), "contact_settings", ["created_at"])

    op.create_table(
        "projects_settings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        _singleton_key(),
        sa.Column("projects_title", sa.String(length=255), nullable=False),
        sa.Column("projects_subtitle", sa.Text(), nullable=False),
        sa.Column("view_all_button_text", sa.String(length=255), nullable=False),
        sa.Column("view_all_button_url", sa.String(length=1024), nullable=False),
        sa.Column(
            "show_view_all_button", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        sa.Column("max_featured_projects", sa.Integer(), nullable=False, server_default="6"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_projects_settings_created_at"), "projects_settings", ["created_at"])


def downgrade() -> None:
    for table in (
        "projects_settings",
        "contact_settings",
        "footer",
        "about",
        "portfolio_views",
        "contacts",
        "skills",
        "resumes",
        "images",
        "projects",
        "users",
    ):
        op.drop_table(table)
