# src/neta_promise/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .admin import router as admin_router
from .auth import router as auth_router
from .feed import router as feed_router
from .parties import router as parties_router
from .politicians import router as politicians_router
from .posts import router as posts_router
from .submissions import router as submissions_router
from .votes import router as votes_router

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
