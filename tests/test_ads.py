# tests/test_ads.py
"""Tests for ad interleaving and the ad pool."""

import pytest

from neta_promise.core.settings import settings
from neta_promise.services.ads import FeedCursor, interleave_ads, recent_ads


def _layout(entries):
    return [entry.value if entry.kind == "post" else f"ad:{entry.value}" for entry in entries]


def test_ad_after_every_fourth_item() -> None:
    items = list(range(1, 10))
    entries, _ = interleave_ads(items, ["A", "B"], FeedCursor(), every=4)

    assert _layout(entries) == [1, 2, 3, 4, "ad:A", 5, 6, 7, 8, "ad:B", 9]
    assert [entry.value for entry in entries if entry.kind == "post"] == items


def test_short_batch_gets_no_ads() -> None:
    entries, cursor = interleave_ads([1, 2, 3], ["A"], FeedCursor(), every=4)
    assert _layout(entries) == [1, 2, 3]
    assert cursor == FeedCursor(page=2, ad_offset=0)


def test_empty_ad_pool_leaves_items_unchanged() -> None:
    entries, cursor = interleave_ads(list(range(8)), [], FeedCursor(page=3, ad_offset=5))
    assert all(entry.kind == "post" for entry in entries)
    assert len(entries) == 8
    assert cursor == FeedCursor(page=4, ad_offset=5)


def test_rotation_continues_across_pages() -> None:
    ads = ["A", "B", "C"]
    first, cursor = interleave_ads(list(range(8)), ads, FeedCursor(), every=4)
    second, cursor = interleave_ads(list(range(8)), ads, cursor, every=4)

    assert [e.value for e in first if e.kind == "ad"] == ["A", "B"]
    assert [e.value for e in second if e.kind == "ad"] == ["C", "A"]
    assert cursor == FeedCursor(page=3, ad_offset=4)


def test_fresh_cursor_restarts_rotation() -> None:
    entries, _ = interleave_ads(list(range(4)), ["A", "B"], FeedCursor(page=5), every=4)
    assert [e.value for e in entries if e.kind == "ad"] == ["A"]


def test_last_page_keeps_cursor_page() -> None:
    _, cursor = interleave_ads([1, 2, 3, 4, 5], ["A"], FeedCursor(page=7), every=4, last_page=True)
    assert cursor == FeedCursor(page=7, ad_offset=1)


def test_default_interval_comes_from_settings(monkeypatch) -> None:
    monkeypatch.setattr(settings, "ad_interval", 2)
    entries, _ = interleave_ads([1, 2, 3, 4], ["A", "B"], FeedCursor())
    assert _layout(entries) == [1, 2, "ad:A", 3, 4, "ad:B"]


def test_interval_must_be_positive() -> None:
    with pytest.raises(ValueError):
        interleave_ads([1], ["A"], FeedCursor(), every=0)


def test_recent_ads_newest_first_and_limited(db_session, make_ad) -> None:
    older = make_ad("Older", minutes=1)
    newer = make_ad("Newer", minutes=2)
    newest = make_ad("Newest", minutes=3)

    pool = recent_ads(db_session, limit=2)
    assert [ad.id for ad in pool] == [newest.id, newer.id]
    assert older.id not in {ad.id for ad in pool}
