# src/neta_promise/schemas/vote.py
"""Vote-related Pydantic schemas."""

from typing import Literal

from pydantic import AliasChoices, BaseModel, Field

from neta_promise.db.session import MAX_ROW_ID


class VoteCreate(BaseModel):
    """Schema for casting a vote; accepts camelCase or snake_case keys."""

    post_id: int = Field(
        ...,
        ge=1,
        le=MAX_ROW_ID,
        validation_alias=AliasChoices("postId", "post_id"),
        description="Identifier of the post being voted on",
    )
    vote_type: Literal["up", "down"] = Field(
        ...,
        validation_alias=AliasChoices("voteType", "vote_type"),
        description="'up' or 'down'",
    )


class VoteResponse(BaseModel):
    message: str


class VoteQuotaResponse(BaseModel):
    """Today's vote usage for the calling voter."""

    voter_id: str
    votes_today: int
    remaining: int
    limit: int
