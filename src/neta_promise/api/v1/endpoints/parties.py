# src/neta_promise/api/v1/endpoints/parties.py
"""Public party endpoints."""

from fastapi import APIRouter, HTTPException, status

from neta_promise.models import Party, Politician
from neta_promise.schemas.catalog import NamedRef, PartyMember, PartyProfile

from ..dependencies import RowId, SessionDep

router = APIRouter(prefix="/parties", tags=["parties"])


@router.get("", response_model=list[NamedRef])
async def list_parties(db: SessionDep) -> list[Party]:
    """List parties by name for filter pickers."""
    return db.query(Party).order_by(Party.name.asc(), Party.id.asc()).all()


@router.get("/{party_id}", response_model=PartyProfile)
async def get_party(party_id: RowId, db: SessionDep) -> PartyProfile:
    """Get a party with its member politicians."""
    party = db.query(Party).filter(Party.id == party_id).first()
    if not party:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Party not found"
        )

    members = (
        db.query(Politician)
        .filter(Politician.party_id == party.id)
        .order_by(Politician.name.asc())
        .all()
    )
    return PartyProfile(
        id=party.id,
        name=party.name,
        description=party.description,
        logo_path=party.logo_path,
        members=[PartyMember.model_validate(member) for member in members],
    )
