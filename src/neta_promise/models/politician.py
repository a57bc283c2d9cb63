# src/neta_promise/models/politician.py
"""SQLAlchemy model for politicians."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from neta_promise.db.session import Base
from neta_promise.db.time import utcnow


class Politician(Base):
    """A politician whose promises are tracked.

    Party membership is optional; independents have no party.
    """

    __tablename__ = "politician"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    party_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("party.id", ondelete="SET NULL"),
        nullable=True,
    )
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    photo_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    party: Mapped[Party | None] = relationship("Party", back_populates="members")  # noqa: F821
