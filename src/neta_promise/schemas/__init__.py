# src/neta_promise/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .auth import AdminLoginRequest, TokenResponse
from .catalog import (
    AdCreate,
    PartyCreate,
    PartyResponse,
    PoliticianCreate,
    PoliticianResponse,
    PostCreate,
    PostResponse,
    SubmissionCreate,
    SubmissionResponse,
)
from .feed import FeedResponse, RankedPostResponse
from .vote import VoteCreate, VoteQuotaResponse, VoteResponse

__all__ = [
    "AdminLoginRequest", "TokenResponse",
    "AdCreate",
    "PartyCreate", "PartyResponse",
    "PoliticianCreate", "PoliticianResponse",
    "PostCreate", "PostResponse",
    "SubmissionCreate", "SubmissionResponse",
    "FeedResponse", "RankedPostResponse",
    "VoteCreate", "VoteQuotaResponse", "VoteResponse",
]
