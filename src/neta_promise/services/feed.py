"""Feed pagination over the ranking engine."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sqlalchemy.orm import Session

from neta_promise.core.settings import settings
from neta_promise.models import Ad
from neta_promise.services.ads import recent_ads
from neta_promise.services.ranking import (
    FeedFilters,
    RankedPost,
    SortPolicy,
    count_posts,
    rank_posts,
)


def to_positive_int(value: object, fallback: int) -> int:
    """Coerce ``value`` to an integer >= 1, returning ``fallback`` otherwise."""
    if isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(str(value).strip())
        except (TypeError, ValueError):
            return fallback
    return number if number >= 1 else fallback


@dataclass(frozen=True)
class FeedPage:
    """One window of the feed plus pagination metadata."""

    items: list[RankedPost]
    ads: list[Ad]
    page: int
    limit: int
    total: int
    total_pages: int

    @property
    def has_more(self) -> bool:
        return self.page < self.total_pages


def get_feed_page(
    db: Session,
    filters: FeedFilters,
    sort: SortPolicy = SortPolicy.TRENDING,
    page: object = None,
    limit: object = None,
) -> FeedPage:
    """Return the requested page of the filtered, sorted feed.

    ``page`` defaults to 1 and ``limit`` to the configured page size, capped
    at the configured maximum. A page past the end is not an error: it comes
    back empty with the same metadata, without querying for the window, so
    any page number is safe to pass through.
    """
    page_number = to_positive_int(page, 1)
    page_size = min(
        to_positive_int(limit, settings.feed_page_size),
        settings.feed_max_page_size,
    )
    offset = (page_number - 1) * page_size

    total = count_posts(db, filters)
    total_pages = max(1, math.ceil(total / page_size))
    items = (
        rank_posts(db, filters, sort, limit=page_size, offset=offset)
        if offset < total
        else []
    )

    return FeedPage(
        items=items,
        ads=recent_ads(db, settings.ad_pool_size),
        page=page_number,
        limit=page_size,
        total=total,
        total_pages=total_pages,
    )
