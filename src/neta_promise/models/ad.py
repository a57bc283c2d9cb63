# src/neta_promise/models/ad.py
"""Promotional units rotated into the public feed."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from neta_promise.db.session import Base
from neta_promise.db.time import utcnow


class Ad(Base):
    """An ad card. Ads are not targeted; they rotate in creation order."""

    __tablename__ = "ad"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    image_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    contact_url: Mapped[str] = mapped_column(String(500), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
