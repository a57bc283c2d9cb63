"""Shared API dependencies for authentication and common functionality."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Annotated

from fastapi import Depends, HTTPException, Path, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from neta_promise.core.settings import settings
from neta_promise.db.session import MAX_ROW_ID, get_db
from neta_promise.services.clock import DayClock, get_day_clock
from neta_promise.services.identity import resolve_voter_id

# HTTP Bearer scheme for admin JWT authentication
bearer_scheme = HTTPBearer()

ADMIN_ROLE = "admin"

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]
DayClockDep = Annotated[DayClock, Depends(get_day_clock)]
VoterDep = Annotated[str, Depends(resolve_voter_id)]

# Row id path parameter, bounded to the id column range
RowId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]


def create_access_token(subject: str, extra_claims: dict[str, str] | None = None) -> str:
    """Create a JWT access token for the admin console."""
    to_encode: dict[str, object] = {"sub": subject, "role": ADMIN_ROLE}
    if extra_claims:
        to_encode.update(extra_claims)
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def get_current_admin(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
) -> str:
    """Return the authenticated admin email from the bearer token.

    Args:
        credentials: HTTP Bearer token credentials

    Returns:
        The admin email carried in the token subject

    Raises:
        HTTPException: If the token is invalid, expired, or not an admin token
    """
    try:
        payload = jwt.decode(
            credentials.credentials,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err

    subject = payload.get("sub")
    if (
        subject is None
        or payload.get("role") != ADMIN_ROLE
        or not settings.admin_configured
        or subject != settings.admin_email
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )
    return str(subject)


# Type alias for current admin dependency
AdminDep = Annotated[str, Depends(get_current_admin)]
