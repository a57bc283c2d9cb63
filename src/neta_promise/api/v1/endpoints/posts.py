# src/neta_promise/api/v1/endpoints/posts.py
"""Public post endpoints."""

from fastapi import APIRouter, HTTPException, status

from neta_promise.schemas.feed import RankedPostResponse
from neta_promise.services.ranking import get_ranked_post

from ..dependencies import RowId, SessionDep

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/{post_id}", response_model=RankedPostResponse)
async def get_post(post_id: RowId, db: SessionDep) -> RankedPostResponse:
    """Get a single post with its vote totals, e.g. for a shared link."""
    post = get_ranked_post(db, post_id)
    if post is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )
    return RankedPostResponse.model_validate(post)
