"""Initial schema — users, article, following.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("user_seq", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(50), nullable=False, unique=True),
        sa.Column("nickname", sa.String(50), nullable=True),
    )

    op.create_table(
        "article",
        sa.Column("article_seq", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column(
            "user_seq", sa.BigInteger,
            sa.ForeignKey("users.user_seq", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("written_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("article_text", sa.Text, nullable=False, server_default=""),
        sa.Column("financial_text", sa.Text, nullable=True),
        sa.Column("status", sa.Integer, nullable=False, server_default="1"),
        sa.Column("article_type", sa.Integer, nullable=False, server_default="0"),
        sa.Column("expenditure_category", sa.Integer, nullable=True),
        sa.Column("amount", sa.BigInteger, nullable=True),
        sa.Column("consumption_date", sa.Date, nullable=True),
        sa.CheckConstraint("amount IS NULL OR amount >= 0", name="ck_article_amount"),
    )
    op.create_index("ix_article_user_written", "article", ["user_seq", "written_date"])
    op.create_index("ix_article_user_consumption", "article", ["user_seq", "consumption_date"])

    op.create_table(
        "following",
        sa.Column("following_seq", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column(
            "user_seq", sa.BigInteger,
            sa.ForeignKey("users.user_seq", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "following_user_seq", sa.BigInteger,
            sa.ForeignKey("users.user_seq", ondelete="CASCADE"), nullable=False,
        ),
        sa.UniqueConstraint("user_seq", "following_user_seq", name="uq_following_edge"),
    )
    op.create_index("ix_following_user_seq", "following", ["user_seq"])
    op.create_index("ix_following_following_user_seq", "following", ["following_user_seq"])


def downgrade() -> None:
    op.drop_table("following")
    op.drop_index("ix_article_user_consumption", table_name="article")
    op.drop_index("ix_article_user_written", table_name="article")
    op.drop_table("article")
    op.drop_table("users")
