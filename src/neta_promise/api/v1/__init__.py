# src/neta_promise/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    admin_router,
    auth_router,
    feed_router,
    parties_router,
    politicians_router,
    posts_router,
    submissions_router,
    votes_router,
)

__all__ = [
    "admin_router",
    "auth_router",
    "feed_router",
    "parties_router",
    "politicians_router",
    "posts_router",
    "submissions_router",
    "votes_router",
]
