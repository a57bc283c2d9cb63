# src/neta_promise/schemas/catalog.py
"""Schemas for parties, politicians, posts, ads and submissions."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

from neta_promise.db.session import MAX_ROW_ID

from .feed import RankedPostResponse


def _strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_strip_required)]


class PartyCreate(BaseModel):
    """Schema for creating or replacing a party."""

    name: NonBlankStr = Field(..., max_length=200)
    description: str | None = None
    logo_path: str | None = Field(None, max_length=500, description="Logo file name or URL")


class PartyResponse(BaseModel):
    id: int
    name: str
    description: str | None
    logo_path: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PoliticianCreate(BaseModel):
    """Schema for creating or replacing a politician."""

    name: NonBlankStr = Field(..., max_length=200)
    party_id: int | None = Field(None, ge=1, le=MAX_ROW_ID)
    bio: str | None = None
    photo_path: str | None = Field(None, max_length=500, description="Photo file name or URL")


class PoliticianResponse(BaseModel):
    id: int
    name: str
    party_id: int | None
    bio: str | None
    photo_path: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostCreate(BaseModel):
    """Schema for creating or replacing a promise post.

    ``party_id`` may be omitted; it is then taken from the politician.
    """

    politician_id: int = Field(..., ge=1, le=MAX_ROW_ID)
    party_id: int | None = Field(None, ge=1, le=MAX_ROW_ID)
    promise_text: NonBlankStr = Field(..., max_length=5000)
    location: NonBlankStr = Field(..., max_length=200)
    video_path: str | None = Field(None, max_length=500, description="Video file name or URL")


class PostResponse(BaseModel):
    id: int
    politician_id: int
    party_id: int | None
    promise_text: str
    location: str
    video_path: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AdCreate(BaseModel):
    title: NonBlankStr = Field(..., max_length=200)
    contact_url: NonBlankStr = Field(..., max_length=500)
    image_path: str | None = Field(None, max_length=500)


class AdAdminResponse(BaseModel):
    id: int
    title: str
    image_path: str | None
    contact_url: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SubmissionCreate(BaseModel):
    """A visitor-submitted promise candidate."""

    submitter_name: NonBlankStr = Field(..., max_length=200)
    contact: str | None = Field(None, max_length=200)
    politician_name: NonBlankStr = Field(..., max_length=200)
    location: NonBlankStr = Field(..., max_length=200)
    video_url: NonBlankStr = Field(..., max_length=500)
    promise_text: NonBlankStr = Field(..., max_length=5000)

    @field_validator("contact")
    @classmethod
    def _blank_contact_is_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


class SubmissionResponse(BaseModel):
    id: int
    submitter_name: str
    contact: str | None
    politician_name: str
    location: str
    video_url: str
    promise_text: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NamedRef(BaseModel):
    """Minimal id/name pair used for filter dropdowns."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class PoliticianProfile(BaseModel):
    """Politician page: identity, party and posts newest first."""

    id: int
    name: str
    bio: str | None
    photo_path: str | None
    party_id: int | None
    party_name: str | None
    party_logo: str | None
    posts: list[RankedPostResponse]


class PartyMember(BaseModel):
    id: int
    name: str
    photo_path: str | None

    model_config = ConfigDict(from_attributes=True)


class PartyProfile(BaseModel):
    id: int
    name: str
    description: str | None
    logo_path: str | None
    members: list[PartyMember]


class AdminPage(BaseModel):
    """Paged admin listing envelope."""

    page: int
    total: int
    total_pages: int
    items: list[dict[str, object]]


class AdminOverview(BaseModel):
    parties: int
    politicians: int
    posts: int
    ads: int
    submissions: int
