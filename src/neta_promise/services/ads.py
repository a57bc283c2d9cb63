"""Ad rotation for the public feed."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from neta_promise.core.settings import settings
from neta_promise.models import Ad

ItemT = TypeVar("ItemT")
AdT = TypeVar("AdT")


@dataclass(frozen=True)
class FeedCursor:
    """Continuation state for a feed session.

    A fresh feed load starts at page 1 with ``ad_offset`` 0; a "load more"
    request passes back the cursor returned with the previous page so the ad
    rotation continues where it stopped.
    """

    page: int = 1
    ad_offset: int = 0


@dataclass(frozen=True)
class FeedEntry(Generic[ItemT, AdT]):
    kind: Literal["post", "ad"]
    value: ItemT | AdT


def interleave_ads(
    items: Sequence[ItemT],
    ads: Sequence[AdT],
    cursor: FeedCursor,
    every: int | None = None,
    *,
    last_page: bool = False,
) -> tuple[list[FeedEntry[ItemT, AdT]], FeedCursor]:
    """Insert one ad after every ``every``-th item of this batch.

    Ads are taken round-robin from ``ads`` starting at ``cursor.ad_offset``. A
    trailing group shorter than ``every`` gets no ad. ``every`` defaults to the
    configured ad interval. On the last page the returned cursor keeps the
    current page number, so it never points past the end of the feed.

    Returns:
        The combined entries and the cursor for the following page.
    """
    if every is None:
        every = settings.ad_interval
    if every < 1:
        raise ValueError("every must be a positive integer")

    entries: list[FeedEntry[ItemT, AdT]] = []
    offset = cursor.ad_offset
    for index, item in enumerate(items, start=1):
        entries.append(FeedEntry("post", item))
        if index % every == 0 and ads:
            entries.append(FeedEntry("ad", ads[offset % len(ads)]))
            offset += 1
    next_page = cursor.page if last_page else cursor.page + 1
    return entries, FeedCursor(page=next_page, ad_offset=offset)


def recent_ads(db: Session, limit: int) -> list[Ad]:
    """Return the ad pool: the ``limit`` most recently created ads."""
    stmt = select(Ad).order_by(Ad.created_at.desc(), Ad.id.desc()).limit(limit)
    return list(db.execute(stmt).scalars())
