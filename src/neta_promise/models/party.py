# src/neta_promise/models/party.py
"""SQLAlchemy model for political parties."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from neta_promise.db.session import Base
from neta_promise.db.time import utcnow


class Party(Base):
    """A political party that politicians and posts may belong to."""

    __tablename__ = "party"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    logo_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    members: Mapped[list[Politician]] = relationship(  # noqa: F821
        "Politician",
        back_populates="party",
        passive_deletes=True,
    )
