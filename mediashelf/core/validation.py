# ============================================================================
# FILE: mediashelf/core/validation.py
# Input checks run at the start of every service operation
# ============================================================================
from typing import Optional, Tuple
from mediashelf.core.exceptions import ValidationError, UnauthenticatedError

MEDIA_TYPES = ("movie", "tv")

def require_text(value: Optional[str], field: str) -> str:
    """Return the trimmed value, or raise if it is missing or blank"""
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required")
    return value.strip()

def require_present(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required")
    return value

def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip()

def require_caller(username: Optional[str]) -> str:
    if not username:
        raise UnauthenticatedError()
    return username

def validate_credentials(username: Optional[str], password: Optional[str]) -> Tuple[str, str]:
    """
    Usernames are compared exactly, so only blank values are rejected;
    the password is never trimmed.
    """
    if not username or not username.strip():
        raise ValidationError("username is required")
    if not password:
        raise ValidationError("password is required")
    # bcrypt cannot hash NUL bytes
    if "\0" in password:
        raise ValidationError("password must not contain NUL characters")
    return username, password

def validate_playlist_fields(name: Optional[str], description: Optional[str]) -> Tuple[str, Optional[str]]:
    return require_text(name, "name"), optional_text(description)

def validate_item_fields(
    media_id: Optional[str],
    title: Optional[str],
    poster: Optional[str],
    media_type: Optional[str],
) -> Tuple[str, str, Optional[str], str]:
    # Item fields are stored verbatim; mediaId must match the removal path exactly
    media_id = require_present(media_id, "mediaId")
    title = require_present(title, "title")
    media_type = require_present(media_type, "mediaType")
    if media_type not in MEDIA_TYPES:
        raise ValidationError(f"mediaType must be one of: {', '.join(MEDIA_TYPES)}")
    return media_id, title, poster or None, media_type
