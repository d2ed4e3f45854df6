"""Following ORM — directed follow edge (user_seq follows following_user_seq).

Invariants:
    - Mutual follow = rows in both directions
    - Self edges are not rejected here; readers must tolerate them
"""

from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from spendfeed.db.base import Base, IdType


class Following(Base):
    """Directed follow edge."""
    __tablename__ = "following"
    __table_args__ = (
        UniqueConstraint(
            "user_seq", "following_user_seq", name="uq_following_edge",
        ),
    )

    following_seq: Mapped[int] = mapped_column(
        IdType, primary_key=True, autoincrement=True,
    )
    user_seq: Mapped[int] = mapped_column(
        IdType, ForeignKey("users.user_seq", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    following_user_seq: Mapped[int] = mapped_column(
        IdType, ForeignKey("users.user_seq", ondelete="CASCADE"),
        nullable=False, index=True,
    )
