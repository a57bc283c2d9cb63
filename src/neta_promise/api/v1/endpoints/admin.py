# src/neta_promise/api/v1/endpoints/admin.py
"""Admin console endpoints for curating the catalog.

Every route requires the admin bearer token. Media fields are stored as
references; an update that omits a media reference keeps the existing one.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.orm import Session

from neta_promise.core.settings import settings
from neta_promise.db.session import Base
from neta_promise.models import Ad, Party, Politician, Post, Submission
from neta_promise.schemas.catalog import (
    AdAdminResponse,
    AdCreate,
    AdminOverview,
    AdminPage,
    PartyCreate,
    PartyResponse,
    PoliticianCreate,
    PoliticianResponse,
    PostCreate,
    PostResponse,
    SubmissionResponse,
)
from neta_promise.services.feed import to_positive_int

from ..dependencies import AdminDep, RowId, SessionDep

router = APIRouter(prefix="/admin", tags=["admin"])
logger = logging.getLogger(__name__)


def _count(db: Session, model: type[Base]) -> int:
    return int(db.query(func.count(model.id)).scalar() or 0)  # type: ignore[attr-defined]


def _paginate(
    db: Session,
    model: type[Base],
    schema: type[BaseModel],
    page: str | None,
) -> AdminPage:
    page_number = to_positive_int(page, 1)
    page_size = settings.admin_page_size
    offset = (page_number - 1) * page_size
    total = _count(db, model)
    rows = (
        db.query(model)
        .order_by(model.id.desc())  # type: ignore[attr-defined]
        .limit(page_size)
        .offset(offset)
        .all()
        if offset < total
        else []
    )
    return AdminPage(
        page=page_number,
        total=total,
        total_pages=max(1, math.ceil(total / page_size)),
        items=[schema.model_validate(row).model_dump(mode="json") for row in rows],
    )


def _get_or_404(db: Session, model: type[Base], object_id: int, label: str) -> Any:
    instance = db.get(model, object_id)
    if instance is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label} not found",
        )
    return instance


def _delete(db: Session, model: type[Base], object_id: int, label: str) -> None:
    instance = _get_or_404(db, model, object_id, label)
    db.delete(instance)
    db.commit()
    logger.info("Admin deleted %s %d", label.lower(), object_id)


def _ensure_party(db: Session, party_id: int | None) -> None:
    if party_id is not None and db.get(Party, party_id) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Party does not exist",
        )


def _resolve_post_party(db: Session, data: PostCreate) -> int | None:
    """Return the post's party, defaulting to the politician's party."""
    politician = db.get(Politician, data.politician_id)
    if politician is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Politician does not exist",
        )
    if data.party_id is not None:
        _ensure_party(db, data.party_id)
        return data.party_id
    return politician.party_id


@router.get("/overview", response_model=AdminOverview)
async def overview(_admin: AdminDep, db: SessionDep) -> AdminOverview:
    """Return record counts for the dashboard header."""
    return AdminOverview(
        parties=_count(db, Party),
        politicians=_count(db, Politician),
        posts=_count(db, Post),
        ads=_count(db, Ad),
        submissions=_count(db, Submission),
    )


# Parties

@router.get("/parties", response_model=AdminPage)
async def list_parties(_admin: AdminDep, db: SessionDep, page: str | None = Query(None)) -> AdminPage:
    return _paginate(db, Party, PartyResponse, page)


@router.post("/parties", response_model=PartyResponse, status_code=status.HTTP_201_CREATED)
async def create_party(data: PartyCreate, _admin: AdminDep, db: SessionDep) -> Party:
    party = Party(**data.model_dump())
    db.add(party)
    db.commit()
    db.refresh(party)
    return party


@router.put("/parties/{party_id}", response_model=PartyResponse)
async def update_party(party_id: RowId, data: PartyCreate, _admin: AdminDep, db: SessionDep) -> Party:
    party = _get_or_404(db, Party, party_id, "Party")
    party.name = data.name
    party.description = data.description
    party.logo_path = data.logo_path or party.logo_path
    db.commit()
    db.refresh(party)
    return party


@router.delete("/parties/{party_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_party(party_id: RowId, _admin: AdminDep, db: SessionDep) -> None:
    _delete(db, Party, party_id, "Party")


# Politicians

@router.get("/politicians", response_model=AdminPage)
async def list_politicians(
    _admin: AdminDep, db: SessionDep, page: str | None = Query(None)
) -> AdminPage:
    return _paginate(db, Politician, PoliticianResponse, page)


@router.post("/politicians", response_model=PoliticianResponse, status_code=status.HTTP_201_CREATED)
async def create_politician(data: PoliticianCreate, _admin: AdminDep, db: SessionDep) -> Politician:
    _ensure_party(db, data.party_id)
    politician = Politician(**data.model_dump())
    db.add(politician)
    db.commit()
    db.refresh(politician)
    return politician


@router.put("/politicians/{politician_id}", response_model=PoliticianResponse)
async def update_politician(
    politician_id: RowId, data: PoliticianCreate, _admin: AdminDep, db: SessionDep
) -> Politician:
    politician = _get_or_404(db, Politician, politician_id, "Politician")
    _ensure_party(db, data.party_id)
    politician.name = data.name
    politician.party_id = data.party_id
    politician.bio = data.bio
    politician.photo_path = data.photo_path or politician.photo_path
    db.commit()
    db.refresh(politician)
    return politician


@router.delete("/politicians/{politician_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_politician(politician_id: RowId, _admin: AdminDep, db: SessionDep) -> None:
    _delete(db, Politician, politician_id, "Politician")


# Posts

@router.get("/posts", response_model=AdminPage)
async def list_posts(_admin: AdminDep, db: SessionDep, page: str | None = Query(None)) -> AdminPage:
    return _paginate(db, Post, PostResponse, page)


@router.post("/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(data: PostCreate, _admin: AdminDep, db: SessionDep) -> Post:
    """Publish a promise post; the party defaults to the politician's."""
    if not data.video_path:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="video_path is required",
        )
    post = Post(
        politician_id=data.politician_id,
        party_id=_resolve_post_party(db, data),
        promise_text=data.promise_text,
        location=data.location,
        video_path=data.video_path,
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info("Admin published post %d for politician %d", post.id, post.politician_id)
    return post


@router.put("/posts/{post_id}", response_model=PostResponse)
async def update_post(post_id: RowId, data: PostCreate, _admin: AdminDep, db: SessionDep) -> Post:
    post = _get_or_404(db, Post, post_id, "Post")
    post.party_id = _resolve_post_party(db, data)
    post.politician_id = data.politician_id
    post.promise_text = data.promise_text
    post.location = data.location
    post.video_path = data.video_path or post.video_path
    db.commit()
    db.refresh(post)
    return post


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: RowId, _admin: AdminDep, db: SessionDep) -> None:
    _delete(db, Post, post_id, "Post")


# Ads

@router.get("/ads", response_model=AdminPage)
async def list_ads(_admin: AdminDep, db: SessionDep, page: str | None = Query(None)) -> AdminPage:
    return _paginate(db, Ad, AdAdminResponse, page)


@router.post("/ads", response_model=AdAdminResponse, status_code=status.HTTP_201_CREATED)
async def create_ad(data: AdCreate, _admin: AdminDep, db: SessionDep) -> Ad:
    if not data.image_path:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="image_path is required",
        )
    ad = Ad(**data.model_dump())
    db.add(ad)
    db.commit()
    db.refresh(ad)
    return ad


@router.put("/ads/{ad_id}", response_model=AdAdminResponse)
async def update_ad(ad_id: RowId, data: AdCreate, _admin: AdminDep, db: SessionDep) -> Ad:
    ad = _get_or_404(db, Ad, ad_id, "Ad")
    ad.title = data.title
    ad.contact_url = data.contact_url
    ad.image_path = data.image_path or ad.image_path
    db.commit()
    db.refresh(ad)
    return ad


@router.delete("/ads/{ad_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ad(ad_id: RowId, _admin: AdminDep, db: SessionDep) -> None:
    _delete(db, Ad, ad_id, "Ad")


# Submissions

@router.get("/submissions", response_model=AdminPage)
async def list_submissions(
    _admin: AdminDep, db: SessionDep, page: str | None = Query(None)
) -> AdminPage:
    return _paginate(db, Submission, SubmissionResponse, page)


@router.delete("/submissions/{submission_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_submission(submission_id: RowId, _admin: AdminDep, db: SessionDep) -> None:
    _delete(db, Submission, submission_id, "Submission")
