"""User ORM — identity of an article author / follower.

Invariants:
    - user_seq is the numeric primary key used by feed and statistics
    - user_id is the unique login id used by profile pages
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from spendfeed.db.base import Base, IdType


class User(Base):
    """Registered user."""
    __tablename__ = "users"

    user_seq: Mapped[int] = mapped_column(
        IdType, primary_key=True, autoincrement=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True,
    )
    nickname: Mapped[str | None] = mapped_column(String(50), nullable=True)
