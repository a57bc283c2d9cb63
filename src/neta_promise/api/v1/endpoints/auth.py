# src/neta_promise/api/v1/endpoints/auth.py
"""Admin authentication endpoints."""

from __future__ import annotations

import logging
import secrets

from fastapi import APIRouter, HTTPException, status

from neta_promise.core.settings import settings
from neta_promise.schemas.auth import AdminLoginRequest, TokenResponse

from ..dependencies import AdminDep, create_access_token

router = APIRouter(prefix="/admin", tags=["authentication"])
logger = logging.getLogger(__name__)


def _credentials_match(email: str, password: str) -> bool:
    if not settings.admin_configured:
        return False
    email_ok = secrets.compare_digest(email.encode(), str(settings.admin_email).encode())
    password_ok = secrets.compare_digest(password.encode(), str(settings.admin_password).encode())
    return email_ok and password_ok


@router.post("/login", response_model=TokenResponse)
async def login(credentials: AdminLoginRequest) -> TokenResponse:
    """Exchange the admin email and password for a bearer token."""
    if not _credentials_match(credentials.email, credentials.password):
        logger.warning("Rejected admin login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return TokenResponse(access_token=create_access_token(credentials.email))


@router.get("/me")
async def whoami(admin: AdminDep) -> dict[str, str]:
    """Return the email of the signed-in admin."""
    return {"email": admin}
