"""Vote aggregation and feed ordering.

Aggregates are computed from the vote table at query time; there are no
stored counters on posts that could drift from the underlying votes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from sqlalchemy import Select, case, distinct, func, or_, select
from sqlalchemy.orm import Session

from neta_promise.models import VOTE_DOWN, VOTE_UP, Party, Politician, Post, Vote


class SortPolicy(str, Enum):
    """Supported feed orderings."""

    TRENDING = "trending"
    NEW = "new"
    OPTIMISTIC = "optimistic"
    PESSIMISTIC = "pessimistic"

    @classmethod
    def parse(cls, value: str | None) -> SortPolicy:
        """Return the matching policy, falling back to trending."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.TRENDING


@dataclass(frozen=True)
class FeedFilters:
    """Optional feed filters, combined with AND."""

    politician_id: int | None = None
    party_id: int | None = None
    location: str | None = None
    q: str | None = None


@dataclass(frozen=True)
class RankedPost:
    """A post joined with its politician, party and vote aggregates."""

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

    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes


UPVOTES = func.coalesce(func.sum(case((Vote.vote_type == VOTE_UP, 1), else_=0)), 0)
DOWNVOTES = func.coalesce(func.sum(case((Vote.vote_type == VOTE_DOWN, 1), else_=0)), 0)
SCORE = UPVOTES - DOWNVOTES


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _contains(column, term: str):  # type: ignore[no-untyped-def]
    return column.ilike(f"%{_escape_like(term)}%", escape="\\")


def apply_filters(stmt: Select, filters: FeedFilters) -> Select:  # type: ignore[type-arg]
    """Add WHERE clauses for ``filters`` to a statement joined on politician/party."""
    if filters.politician_id is not None:
        stmt = stmt.where(Post.politician_id == filters.politician_id)
    if filters.party_id is not None:
        stmt = stmt.where(Post.party_id == filters.party_id)
    if filters.location:
        stmt = stmt.where(_contains(Post.location, filters.location))
    if filters.q:
        stmt = stmt.where(
            or_(
                _contains(Post.promise_text, filters.q),
                _contains(Politician.name, filters.q),
                _contains(func.coalesce(Party.name, ""), filters.q),
            )
        )
    return stmt


def _order_by(sort: SortPolicy) -> list:  # type: ignore[type-arg]
    # Newest first, then highest id, breaks every tie so page windows are stable.
    tiebreak = [Post.created_at.desc(), Post.id.desc()]
    if sort is SortPolicy.NEW:
        return tiebreak
    if sort is SortPolicy.OPTIMISTIC:
        return [UPVOTES.desc(), *tiebreak]
    if sort is SortPolicy.PESSIMISTIC:
        return [DOWNVOTES.desc(), *tiebreak]
    return [SCORE.desc(), *tiebreak]


def _ranked_select() -> Select:  # type: ignore[type-arg]
    return (
        select(
            Post.id,
            Post.promise_text,
            Post.location,
            Post.video_path,
            Post.created_at,
            Politician.id,
            Politician.name,
            Politician.photo_path,
            Party.id,
            Party.name,
            Party.logo_path,
            UPVOTES,
            DOWNVOTES,
        )
        .select_from(Post)
        .join(Politician, Politician.id == Post.politician_id)
        .outerjoin(Party, Party.id == Post.party_id)
        .outerjoin(Vote, Vote.post_id == Post.id)
        .group_by(Post.id, Politician.id, Party.id)
    )


def _to_ranked(row) -> RankedPost:  # type: ignore[no-untyped-def]
    (
        post_id, text, location, media, created_at,
        politician_id, politician_name, politician_photo,
        party_id, party_name, party_logo,
        upvotes, downvotes,
    ) = row
    return RankedPost(
        id=post_id,
        text=text,
        location=location or "",
        media=media,
        created_at=created_at,
        politician_id=politician_id,
        politician_name=politician_name,
        politician_photo=politician_photo,
        party_id=party_id,
        party_name=party_name,
        party_logo=party_logo,
        upvotes=int(upvotes or 0),
        downvotes=int(downvotes or 0),
    )


def rank_posts(
    db: Session,
    filters: FeedFilters | None = None,
    sort: SortPolicy = SortPolicy.TRENDING,
    *,
    limit: int | None = None,
    offset: int = 0,
) -> list[RankedPost]:
    """Return filtered posts with aggregates in ``sort`` order.

    Args:
        db: Database session.
        filters: Optional filters; ``None`` matches every post.
        sort: Ordering policy.
        limit: Window size, or ``None`` for all rows.
        offset: Rows to skip before the window.

    Returns:
        Ranked posts; posts without votes report zero for every aggregate.
    """
    stmt = apply_filters(_ranked_select(), filters or FeedFilters())
    stmt = stmt.order_by(*_order_by(sort))
    if limit is not None:
        stmt = stmt.limit(limit)
    if offset:
        stmt = stmt.offset(offset)
    return [_to_ranked(row) for row in db.execute(stmt).all()]


def count_posts(db: Session, filters: FeedFilters | None = None) -> int:
    """Count distinct posts matching ``filters`` regardless of any window."""
    stmt = (
        select(func.count(distinct(Post.id)))
        .select_from(Post)
        .join(Politician, Politician.id == Post.politician_id)
        .outerjoin(Party, Party.id == Post.party_id)
    )
    stmt = apply_filters(stmt, filters or FeedFilters())
    return int(db.execute(stmt).scalar_one())


def get_ranked_post(db: Session, post_id: int) -> RankedPost | None:
    """Return a single post with its aggregates."""
    row = db.execute(_ranked_select().where(Post.id == post_id)).first()
    return _to_ranked(row) if row is not None else None
