"""Vote ledger: append-only daily votes with a per-voter quota.

The ledger never updates or deletes votes. A voter gets one vote per post per
calendar day and at most ``daily_limit`` votes per day across all posts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from neta_promise.core.settings import settings
from neta_promise.db.session import MAX_ROW_ID
from neta_promise.models import VOTE_TYPES, Post, Vote
from neta_promise.services.clock import DayClock

logger = logging.getLogger(__name__)


class VoteError(RuntimeError):
    """Base exception for rejected votes."""


class InvalidPayload(VoteError):
    """Raised when the vote request is malformed or targets no post."""


class QuotaExceeded(VoteError):
    """Raised when the voter has used up today's votes."""


class DuplicateVote(VoteError):
    """Raised when the voter already voted on this post today."""


class StoreUnavailable(RuntimeError):
    """Raised when the database fails while recording a vote."""


@dataclass(frozen=True)
class QuotaStatus:
    """Snapshot of a voter's usage for the current day."""

    votes_today: int
    limit: int

    @property
    def remaining(self) -> int:
        return max(0, self.limit - self.votes_today)


class VoteLedger:
    """Record votes and enforce the daily rules."""

    def __init__(self, db: Session, clock: DayClock, daily_limit: int | None = None) -> None:
        self.db = db
        self.clock = clock
        self.daily_limit = settings.daily_vote_limit if daily_limit is None else daily_limit

    def votes_cast_today(self, voter_id: str) -> int:
        """Return how many votes ``voter_id`` has cast today."""
        stmt = select(func.count(Vote.id)).where(
            Vote.voter_id == voter_id,
            Vote.vote_date == self.clock.today(),
        )
        return int(self.db.execute(stmt).scalar_one())

    def quota_status(self, voter_id: str) -> QuotaStatus:
        return QuotaStatus(votes_today=self.votes_cast_today(voter_id), limit=self.daily_limit)

    def _post_exists(self, post_id: int) -> bool:
        return self.db.get(Post, post_id) is not None

    def _validate(self, post_id: object, direction: object) -> int:
        if direction not in VOTE_TYPES:
            raise InvalidPayload("Invalid vote payload")
        if isinstance(post_id, bool) or not isinstance(post_id, int):
            raise InvalidPayload("Invalid vote payload")
        if not 1 <= post_id <= MAX_ROW_ID:
            raise InvalidPayload("Invalid vote payload")
        if not self._post_exists(post_id):
            raise InvalidPayload("Post not found")
        return post_id

    def cast_vote(self, post_id: int, voter_id: str, direction: str) -> Vote:
        """Append a vote for ``voter_id`` on ``post_id`` dated today.

        Args:
            post_id: Identifier of an existing post.
            voter_id: Opaque anonymous voter token.
            direction: ``"up"`` or ``"down"``.

        Returns:
            The persisted Vote row.

        Raises:
            InvalidPayload: Unknown direction or post.
            QuotaExceeded: The voter reached the daily limit.
            DuplicateVote: The voter already voted on this post today.
            StoreUnavailable: The database failed; nothing was written.
        """
        try:
            post_id = self._validate(post_id, direction)
            today = self.clock.today()

            if self.votes_cast_today(voter_id) >= self.daily_limit:
                logger.info("Vote quota reached for voter on %s", today)
                raise QuotaExceeded(f"Daily vote limit reached ({self.daily_limit})")

            # Duplicates are decided by the (voter_id, post_id, vote_date) unique constraint.
            vote = Vote(post_id=post_id, voter_id=voter_id, vote_type=direction, vote_date=today)
            self.db.add(vote)
            try:
                self.db.commit()
            except IntegrityError as err:
                self.db.rollback()
                if not self._post_exists(post_id):
                    raise InvalidPayload("Post not found") from err
                raise DuplicateVote("Already voted for this post today") from err
        except SQLAlchemyError as err:
            self.db.rollback()
            logger.error("Vote store failure: %s", err, exc_info=True)
            raise StoreUnavailable("Vote could not be recorded") from err

        self.db.refresh(vote)
        logger.info("Accepted %s vote on post %d", direction, post_id)
        return vote
