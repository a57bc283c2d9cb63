# src/neta_promise/services/__init__.py
"""Business logic services for the Neta Promise application."""

from .ads import FeedCursor, interleave_ads
from .clock import DayClock, FixedDayClock
from .feed import FeedPage, get_feed_page
from .ranking import FeedFilters, SortPolicy, rank_posts
from .votes import VoteLedger

__all__ = [
    "FeedCursor", "interleave_ads",
    "DayClock", "FixedDayClock",
    "FeedPage", "get_feed_page",
    "FeedFilters", "SortPolicy", "rank_posts",
    "VoteLedger",
]
