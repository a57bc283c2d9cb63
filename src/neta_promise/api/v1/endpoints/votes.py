# src/neta_promise/api/v1/endpoints/votes.py
"""Vote-related endpoints for the Neta Promise API."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import ValidationError

from neta_promise.schemas.vote import VoteCreate, VoteQuotaResponse, VoteResponse
from neta_promise.services.votes import (
    DuplicateVote,
    InvalidPayload,
    QuotaExceeded,
    VoteLedger,
)

from ..dependencies import DayClockDep, SessionDep, VoterDep

router = APIRouter(prefix="/votes", tags=["votes"])


async def _parse_vote(request: Request) -> VoteCreate:
    try:
        payload: Any = await request.json()
    except ValueError as err:
        raise InvalidPayload("Invalid vote payload") from err
    try:
        return VoteCreate.model_validate(payload)
    except ValidationError as err:
        raise InvalidPayload("Invalid vote payload") from err


@router.post("", response_model=VoteResponse)
async def cast_vote(
    request: Request,
    db: SessionDep,
    clock: DayClockDep,
    voter_id: VoterDep,
) -> VoteResponse:
    """Record an up or down vote from the calling anonymous voter.

    Responses:
        400: malformed payload or unknown post
        409: this voter already voted on the post today
        429: this voter reached the daily vote limit
    """
    ledger = VoteLedger(db, clock)
    try:
        vote_data = await _parse_vote(request)
        ledger.cast_vote(vote_data.post_id, voter_id, vote_data.vote_type)
    except InvalidPayload as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    except QuotaExceeded as err:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail=str(err)
        ) from err
    except DuplicateVote as err:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(err)) from err

    return VoteResponse(message="Vote accepted")


@router.get("/me", response_model=VoteQuotaResponse)
async def get_my_quota(
    db: SessionDep,
    clock: DayClockDep,
    voter_id: VoterDep,
) -> VoteQuotaResponse:
    """Return how many votes the caller has left today."""
    quota = VoteLedger(db, clock).quota_status(voter_id)
    return VoteQuotaResponse(
        voter_id=voter_id,
        votes_today=quota.votes_today,
        remaining=quota.remaining,
        limit=quota.limit,
    )
