# src/neta_promise/schemas/feed.py
"""Schemas for the public feed."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RankedPostResponse(BaseModel):
    """A post with politician, party and vote aggregates."""

    id: int
    text: str
    location: str
    media: str | None
    created_at: datetime
    politician_id: int
    politician_name: str
    politician_photo: str | None
    party_id: int | None
    party_name: str | None
    party_logo: str | None
    upvotes: int
    downvotes: int
    score: int

    model_config = ConfigDict(from_attributes=True)


class AdResponse(BaseModel):
    id: int
    title: str
    image_path: str | None
    contact_url: str

    model_config = ConfigDict(from_attributes=True)


class FeedEntryResponse(BaseModel):
    """One slot of the interleaved feed: either a post or an ad."""

    kind: Literal["post", "ad"]
    post: RankedPostResponse | None = None
    ad: AdResponse | None = None


class FeedCursorResponse(BaseModel):
    """Pass back as ``page`` and ``ad_offset`` to load the next page."""

    page: int
    ad_offset: int


class FeedResponse(BaseModel):
    """One page of the feed.

    Pagination fields are serialized in camelCase for the browser client.
    """

    items: list[RankedPostResponse]
    ads: list[AdResponse]
    page: int
    total_pages: int = Field(alias="totalPages")
    total: int
    has_more: bool = Field(alias="hasMore")
    entries: list[FeedEntryResponse]
    next_cursor: FeedCursorResponse

    model_config = ConfigDict(populate_by_name=True)
