"""Anonymous voter identity carried in a long-lived cookie."""

from __future__ import annotations

import logging
import re
import uuid

from fastapi import Request, Response

from neta_promise.core.settings import settings

logger = logging.getLogger(__name__)

# Tokens we mint are UUID4 strings; anything else the client sends is replaced.
_TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def is_recognized_token(value: str | None) -> bool:
    """Return True if ``value`` looks like a voter token we would have issued."""
    return bool(value) and _TOKEN_PATTERN.fullmatch(value or "") is not None


def mint_voter_id() -> str:
    """Return a fresh random voter token."""
    return str(uuid.uuid4())


def resolve_voter_id(request: Request, response: Response) -> str:
    """Return the caller's voter identity, issuing a cookie when absent.

    The identity is independent of admin authentication. A client that clears
    its cookies simply becomes a new voter with a fresh daily quota.
    """
    existing = request.cookies.get(settings.anon_cookie_name)
    if is_recognized_token(existing):
        return existing  # type: ignore[return-value]

    voter_id = mint_voter_id()
    response.set_cookie(
        key=settings.anon_cookie_name,
        value=voter_id,
        max_age=settings.anon_cookie_max_age,
        path="/",
        samesite="lax",
        httponly=settings.anon_cookie_httponly,
        secure=settings.cookie_secure,
    )
    logger.debug("Issued new voter identity")
    return voter_id
