# src/neta_promise/api/v1/endpoints/politicians.py
"""Public politician endpoints."""

from fastapi import APIRouter, HTTPException, status

from neta_promise.models import Politician
from neta_promise.schemas.catalog import NamedRef, PoliticianProfile
from neta_promise.schemas.feed import RankedPostResponse
from neta_promise.services.ranking import FeedFilters, SortPolicy, rank_posts

from ..dependencies import RowId, SessionDep

router = APIRouter(prefix="/politicians", tags=["politicians"])


@router.get("", response_model=list[NamedRef])
async def list_politicians(db: SessionDep) -> list[Politician]:
    """List politicians by name for filter pickers."""
    return db.query(Politician).order_by(Politician.name.asc(), Politician.id.asc()).all()


@router.get("/{politician_id}", response_model=PoliticianProfile)
async def get_politician(politician_id: RowId, db: SessionDep) -> PoliticianProfile:
    """Get a politician profile with their posts, newest first."""
    politician = db.query(Politician).filter(Politician.id == politician_id).first()
    if not politician:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Politician not found"
        )

    posts = rank_posts(db, FeedFilters(politician_id=politician.id), SortPolicy.NEW)
    party = politician.party
    return PoliticianProfile(
        id=politician.id,
        name=politician.name,
        bio=politician.bio,
        photo_path=politician.photo_path,
        party_id=party.id if party else None,
        party_name=party.name if party else None,
        party_logo=party.logo_path if party else None,
        posts=[RankedPostResponse.model_validate(post) for post in posts],
    )
