# src/neta_promise/schemas/auth.py
"""Admin authentication schemas."""

from pydantic import BaseModel, Field


class AdminLoginRequest(BaseModel):
    email: str = Field(..., min_length=1, max_length=200)
    password: str = Field(..., min_length=1, max_length=200)


class TokenResponse(BaseModel):
    """Bearer token issued to the admin console."""

    access_token: str
    token_type: str = "bearer"
