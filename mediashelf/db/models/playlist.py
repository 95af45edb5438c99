
# ============================================================================
# FILE: mediashelf/db/models/playlist.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from mediashelf.db.base import Base

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class Playlist(Base):
    """
    User-created playlist. Owned by a plain username string; there is no
    foreign key to users. updated_at is stamped by the service layer on
    every mutation, not by an ORM hook.
    """
    __tablename__ = "playlists"
    # Deleted ids must never be handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, index=True, nullable=False)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    items = relationship(
        "PlaylistItem",
        back_populates="playlist",
        cascade="all, delete-orphan",
        order_by="PlaylistItem.id",
        lazy="selectin",
    )

class PlaylistItem(Base):
    """Movie or TV entry embedded in a playlist"""
    __tablename__ = "playlist_items"
    __table_args__ = (
        UniqueConstraint("playlist_id", "media_id", name="uq_playlist_items_playlist_media"),
    )

    id = Column(Integer, primary_key=True, index=True)
    playlist_id = Column(Integer, ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False)
    media_id = Column(String, nullable=False)  # external catalogue id, e.g. tt0111161
    title = Column(String, nullable=False)
    poster = Column(String, nullable=True)
    media_type = Column(String(8), nullable=False)  # movie | tv
    added_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    playlist = relationship("Playlist", back_populates="items")
