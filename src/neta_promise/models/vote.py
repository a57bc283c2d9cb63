# src/neta_promise/models/vote.py
"""Models capturing voting interactions on posts."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from neta_promise.db.session import Base
from neta_promise.db.time import utcnow

VOTE_UP = "up"
VOTE_DOWN = "down"
VOTE_TYPES = (VOTE_UP, VOTE_DOWN)


class Vote(Base):
    """One anonymous vote on a post for one calendar day.

    Rows are append-only; one row per voter, post and day.
    """

    __tablename__ = "vote"
    __table_args__ = (
        CheckConstraint("vote_type IN ('up', 'down')", name="ck_vote_vote_type"),
        UniqueConstraint("voter_id", "post_id", "vote_date", name="uq_vote_voter_post_day"),
        Index("ix_vote_post_id", "post_id"),
        Index("ix_vote_voter_day", "voter_id", "vote_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
    )
    voter_id: Mapped[str] = mapped_column(String(64), nullable=False)
    vote_type: Mapped[str] = mapped_column(String(4), nullable=False)
    # Server-side calendar day, not a timestamp.
    vote_date: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
