
# ============================================================================
# FILE: mediashelf/schemas/playlist.py
# ============================================================================
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

class CamelModel(BaseModel):
    """Accepts and emits camelCase JSON keys (mediaId, updatedAt, ...)"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

class PlaylistWrite(CamelModel):
    """Schema for creating or replacing a playlist's details"""
    name: Optional[str] = None
    description: Optional[str] = None

class PlaylistItemAdd(CamelModel):
    """Schema for adding a movie or TV entry to a playlist"""
    media_id: Optional[str] = None
    title: Optional[str] = None
    poster: Optional[str] = None
    media_type: Optional[str] = None

class PlaylistItemResponse(CamelModel):
    media_id: str
    title: str
    poster: Optional[str] = None
    media_type: str
    added_at: datetime

class PlaylistResponse(CamelModel):
    """Schema for playlist response"""
    id: int
    name: str
    description: Optional[str] = None
    username: str
    items: List[PlaylistItemResponse] = []
    created_at: datetime
    updated_at: datetime

class MessageResponse(BaseModel):
    message: str
