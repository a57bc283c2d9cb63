# tests/helpers.py
from neta_promise.core.settings import settings


def voter(voter_id: str) -> dict[str, str]:
    """Return request headers that identify as ``voter_id``."""
    return {"Cookie": f"{settings.anon_cookie_name}={voter_id}"}
