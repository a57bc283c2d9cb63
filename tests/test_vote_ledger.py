# tests/test_vote_ledger.py
"""Tests for the vote ledger service."""

from datetime import timedelta

import pytest
from sqlalchemy import func, select

from neta_promise.models import Vote
from neta_promise.services.votes import (
    DuplicateVote,
    InvalidPayload,
    QuotaExceeded,
    VoteLedger,
)


@pytest.fixture()
def ledger(db_session, day_clock):
    return VoteLedger(db_session, day_clock, daily_limit=30)


@pytest.fixture()
def posts(make_post, politician_with_party):
    return [make_post(politician_with_party) for _ in range(32)]


def _stored_votes(db_session, **criteria) -> int:
    stmt = select(func.count(Vote.id)).filter_by(**criteria)
    return db_session.execute(stmt).scalar_one()


def test_vote_is_dated_with_the_clock_day(ledger, posts, day_clock) -> None:
    vote = ledger.cast_vote(posts[0].id, "voter-a", "up")
    assert vote.vote_date == day_clock.today()
    assert vote.vote_type == "up"


def test_second_vote_same_day_is_duplicate(ledger, posts, db_session) -> None:
    ledger.cast_vote(posts[0].id, "voter-a", "up")

    with pytest.raises(DuplicateVote):
        ledger.cast_vote(posts[0].id, "voter-a", "up")

    # Changing direction does not get around the daily limit per post.
    with pytest.raises(DuplicateVote):
        ledger.cast_vote(posts[0].id, "voter-a", "down")

    assert _stored_votes(db_session, post_id=posts[0].id, voter_id="voter-a") == 1


def test_duplicate_rejection_leaves_session_usable(ledger, posts) -> None:
    ledger.cast_vote(posts[0].id, "voter-a", "up")
    with pytest.raises(DuplicateVote):
        ledger.cast_vote(posts[0].id, "voter-a", "up")

    vote = ledger.cast_vote(posts[1].id, "voter-a", "down")
    assert vote.id is not None


def test_thirty_votes_then_quota_exceeded(ledger, posts, db_session) -> None:
    for post in posts[:30]:
        ledger.cast_vote(post.id, "voter-a", "up")

    with pytest.raises(QuotaExceeded):
        ledger.cast_vote(posts[30].id, "voter-a", "up")

    # Quota is checked first, so even a repeat target reports the quota.
    with pytest.raises(QuotaExceeded):
        ledger.cast_vote(posts[0].id, "voter-a", "down")

    assert _stored_votes(db_session, voter_id="voter-a") == 30


def test_quota_is_per_voter(ledger, posts) -> None:
    for post in posts[:30]:
        ledger.cast_vote(post.id, "voter-a", "up")

    assert ledger.cast_vote(posts[30].id, "voter-b", "up").voter_id == "voter-b"


def test_new_day_resets_quota_and_uniqueness(ledger, posts, day_clock, db_session) -> None:
    for post in posts[:30]:
        ledger.cast_vote(post.id, "voter-a", "up")

    day_clock.day = day_clock.day + timedelta(days=1)

    ledger.cast_vote(posts[0].id, "voter-a", "up")
    assert ledger.votes_cast_today("voter-a") == 1
    assert _stored_votes(db_session, post_id=posts[0].id, voter_id="voter-a") == 2


@pytest.mark.parametrize("direction", ["sideways", "", None, "UP", 1])
def test_invalid_direction(ledger, posts, direction) -> None:
    with pytest.raises(InvalidPayload):
        ledger.cast_vote(posts[0].id, "voter-a", direction)


@pytest.mark.parametrize("post_id", [0, -4, None, "abc", True, 2**31, 10**20])
def test_invalid_post_id(ledger, post_id) -> None:
    with pytest.raises(InvalidPayload):
        ledger.cast_vote(post_id, "voter-a", "up")


def test_missing_post_is_invalid_payload(ledger, db_session) -> None:
    with pytest.raises(InvalidPayload):
        ledger.cast_vote(99999, "voter-a", "up")
    assert _stored_votes(db_session) == 0


def test_quota_status_counts_only_today(ledger, posts, add_votes, day_clock) -> None:
    ledger.cast_vote(posts[0].id, "voter-a", "up")
    ledger.cast_vote(posts[1].id, "voter-a", "down")

    status = ledger.quota_status("voter-a")
    assert status.votes_today == 2
    assert status.remaining == 28
    assert status.limit == 30

    day_clock.day = day_clock.day + timedelta(days=1)
    assert ledger.quota_status("voter-a").remaining == 30


def test_unique_constraint_backs_the_rule(db_session, posts, day_clock) -> None:
    """Two rows for the same voter, post and day cannot be stored at all."""
    from sqlalchemy.exc import IntegrityError

    for _ in range(2):
        db_session.add(
            Vote(post_id=posts[0].id, voter_id="racer", vote_type="up", vote_date=day_clock.today())
        )
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()
