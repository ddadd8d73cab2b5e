"""
Initial schema: users and blogs.

Revision ID: 0001
Revises:
Create Date: 2026-03-02

- users: 账号与作者聚合计数 (total_posts / total_reads)
- blogs: 博客内容，author_id 外键指向 users
"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

revision: str = "0001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

JSON_TYPE = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False, comment="主键 (UUID v7)"),
        sa.Column("fullname", sa.String(length=80), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("profile_img", sa.String(length=500), nullable=True),
        sa.Column("total_posts", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("total_reads", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint("length(trim(email)) > 0", name=op.f("ck_users_email_not_empty")),
        sa.CheckConstraint(
            "length(trim(username)) > 0", name=op.f("ck_users_username_not_empty")
        ),
        sa.CheckConstraint(
            "length(password_hash) > 0", name=op.f("ck_users_password_not_empty")
        ),
        sa.CheckConstraint(
            "total_posts >= 0", name=op.f("ck_users_total_posts_non_negative")
        ),
        sa.CheckConstraint(
            "total_reads >= 0", name=op.f("ck_users_total_reads_non_negative")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
        sa.UniqueConstraint("email", name=op.f("uq_users_email")),
        sa.UniqueConstraint("username", name=op.f("uq_users_username")),
    )

    op.create_table(
        "blogs",
        sa.Column("id", sa.Uuid(), nullable=False, comment="主键 (UUID v7)"),
        sa.Column("blog_id", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("des", sa.Text(), nullable=False),
        sa.Column("banner", sa.Text(), nullable=False),
        sa.Column("content", JSON_TYPE, nullable=False),
        sa.Column("tags", JSON_TYPE, nullable=False),
        sa.Column("author_id", sa.Uuid(), nullable=False),
        sa.Column("draft", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("total_reads", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column(
            "published_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint("length(blog_id) > 0", name=op.f("ck_blogs_blog_id_not_empty")),
        sa.CheckConstraint(
            "total_reads >= 0", name=op.f("ck_blogs_total_reads_non_negative")
        ),
        sa.ForeignKeyConstraint(
            ["author_id"], ["users.id"], name=op.f("fk_blogs_author_id_users")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_blogs")),
        sa.UniqueConstraint("blog_id", name=op.f("uq_blogs_blog_id")),
    )
    op.create_index(op.f("ix_blogs_author_id"), "blogs", ["author_id"], unique=False)
    op.create_index(
        "ix_blogs_draft_published_at", "blogs", ["draft", "published_at"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_blogs_draft_published_at", table_name="blogs")
    op.drop_index(op.f("ix_blogs_author_id"), table_name="blogs")
    op.drop_table("blogs")
    op.drop_table("users")
