# src/neta_promise/models/post.py
"""SQLAlchemy model for promise posts."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from neta_promise.db.session import Base
from neta_promise.db.time import utcnow


class Post(Base):
    """A promise video attributed to a politician.

    Vote totals are never stored here; they are aggregated from the vote
    table on every read.
    """

    __tablename__ = "post"
    __table_args__ = (
        Index("ix_post_created_at", "created_at"),
        Index("ix_post_politician_id", "politician_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    politician_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("politician.id", ondelete="CASCADE"),
        nullable=False,
    )
    # Backfilled from the politician when omitted.
    party_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("party.id", ondelete="SET NULL"),
        nullable=True,
    )
    promise_text: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    video_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    politician: Mapped[Politician] = relationship("Politician")  # noqa: F821
    party: Mapped[Party | None] = relationship("Party")  # noqa: F821
