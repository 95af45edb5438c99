# ============================================================================
# FILE: mediashelf/api/dependencies.py
# ============================================================================
from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from mediashelf.config import settings
from mediashelf.core.exceptions import UnauthenticatedError
from mediashelf.core.security import decode_access_token
from typing import Optional

# /login takes JSON, so the token is advertised as a plain bearer scheme
bearer_scheme = HTTPBearer(auto_error=False)

def get_caller_username(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    username: Optional[str] = Header(default=None),
) -> str:
    """
    Resolve the identity claim for a playlist request.

    A bearer token from /login always wins and must be valid. Without one,
    the plain `username` header is trusted as-is (anyone who knows a
    username can act as that user) unless REQUIRE_TOKEN is set.
    """
    if credentials:
        payload = decode_access_token(credentials.credentials)
        subject = payload.get("sub")
        if not subject:
            raise UnauthenticatedError("Invalid or expired token")
        return subject

    if settings.REQUIRE_TOKEN:
        raise UnauthenticatedError()

    if not username:
        raise UnauthenticatedError()
    return username
