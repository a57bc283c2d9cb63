# src/neta_promise/api/v1/endpoints/feed.py
"""Public feed endpoint."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from neta_promise.core.settings import settings
from neta_promise.db.session import MAX_ROW_ID
from neta_promise.schemas.feed import (
    AdResponse,
    FeedCursorResponse,
    FeedEntryResponse,
    FeedResponse,
    RankedPostResponse,
)
from neta_promise.services.ads import FeedCursor, interleave_ads
from neta_promise.services.feed import get_feed_page
from neta_promise.services.ranking import FeedFilters, SortPolicy

from ..dependencies import SessionDep, VoterDep

router = APIRouter(prefix="/feed", tags=["feed"])


def _optional_id(name: str, raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw.strip())
    except ValueError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {name} id",
        ) from err
    if value < 1 or value > MAX_ROW_ID:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {name} id",
        )
    return value


def _ad_offset(raw: str | None) -> int:
    try:
        return max(0, int(raw)) if raw is not None else 0
    except ValueError:
        return 0


@router.get("", response_model=FeedResponse)
async def get_feed(
    db: SessionDep,
    _voter_id: VoterDep,
    politician: str | None = Query(None, description="Politician id"),
    party: str | None = Query(None, description="Party id"),
    location: str | None = Query(None, description="Case-insensitive location substring"),
    q: str | None = Query(None, description="Search promise text, politician or party name"),
    sort: str | None = Query("trending", description="trending | new | optimistic | pessimistic"),
    page: str | None = Query(None, description="1-based page number"),
    limit: str | None = Query(None, description="Page size, at most 20"),
    ad_offset: str | None = Query(None, description="Ad rotation position from next_cursor"),
) -> FeedResponse:
    """Return one page of the filtered, sorted feed with ads interleaved.

    Omitting ``ad_offset`` starts the ad rotation afresh; pass the
    ``next_cursor`` from the previous response to continue a "load more".
    """
    filters = FeedFilters(
        politician_id=_optional_id("politician", politician),
        party_id=_optional_id("party", party),
        location=(location or "").strip() or None,
        q=(q or "").strip() or None,
    )
    feed_page = get_feed_page(db, filters, SortPolicy.parse(sort), page=page, limit=limit)

    items = [RankedPostResponse.model_validate(item) for item in feed_page.items]
    ads = [AdResponse.model_validate(ad) for ad in feed_page.ads]
    entries, next_cursor = interleave_ads(
        items,
        ads,
        FeedCursor(page=feed_page.page, ad_offset=_ad_offset(ad_offset)),
        every=settings.ad_interval,
        last_page=not feed_page.has_more,
    )

    return FeedResponse(
        items=items,
        ads=ads,
        page=feed_page.page,
        total_pages=feed_page.total_pages,
        total=feed_page.total,
        has_more=feed_page.has_more,
        entries=[
            FeedEntryResponse(kind="post", post=entry.value)
            if entry.kind == "post"
            else FeedEntryResponse(kind="ad", ad=entry.value)
            for entry in entries
        ],
        next_cursor=FeedCursorResponse(page=next_cursor.page, ad_offset=next_cursor.ad_offset),
    )
