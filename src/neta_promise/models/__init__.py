# src/neta_promise/models/__init__.py
"""SQLAlchemy models for the Neta Promise application."""

from .ad import Ad
from .party import Party
from .politician import Politician
from .post import Post
from .submission import Submission
from .vote import VOTE_DOWN, VOTE_TYPES, VOTE_UP, Vote

__all__ = [
    "Ad",
    "Party",
    "Politician",
    "Post",
    "Submission",
    "Vote", "VOTE_UP", "VOTE_DOWN", "VOTE_TYPES",
]
