# ============================================================================
# FILE: mediashelf/services/playlist_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from mediashelf.db.models.playlist import Playlist, PlaylistItem, utcnow
from mediashelf.core.exceptions import NotFoundError, DuplicateItemError
from mediashelf.core.validation import (
    require_caller,
    validate_playlist_fields,
    validate_item_fields,
)
import logging

logger = logging.getLogger(__name__)

class PlaylistService:
    """
    Service layer for playlist operations.

    Every query is filtered by the caller's username, so a playlist owned by
    someone else behaves exactly like one that does not exist. Each mutating
    call stamps updated_at itself before committing.
    """

    def _commit(self, db: Session, action: str) -> None:
        try:
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Error {action}: {e}")
            raise

    def get_user_playlists(self, db: Session, username: Optional[str]) -> List[Playlist]:
        """All playlists for a user, most recently modified first"""
        username = require_caller(username)
        return (
            db.query(Playlist)
            .filter(Playlist.username == username)
            .order_by(Playlist.updated_at.desc(), Playlist.id.desc())
            .all()
        )

    def get_playlist(self, db: Session, playlist_id: int, username: Optional[str]) -> Playlist:
        """Ownership-scoped lookup; raises NotFoundError for missing or foreign playlists"""
        username = require_caller(username)
        playlist = db.query(Playlist).filter(
            Playlist.id == playlist_id,
            Playlist.username == username
        ).first()
        if not playlist:
            raise NotFoundError()
        return playlist

    def create_playlist(
        self,
        db: Session,
        username: Optional[str],
        name: Optional[str],
        description: Optional[str] = None,
    ) -> Playlist:
        """Create a new, empty playlist. Duplicate names are allowed."""
        username = require_caller(username)
        name, description = validate_playlist_fields(name, description)

        now = utcnow()
        playlist = Playlist(
            username=username,
            name=name,
            description=description,
            created_at=now,
            updated_at=now,
        )
        db.add(playlist)
        self._commit(db, "creating playlist")
        db.refresh(playlist)
        logger.info(f"Playlist created: {playlist.id} for user {username}")
        return playlist

    def update_playlist(
        self,
        db: Session,
        playlist_id: int,
        username: Optional[str],
        name: Optional[str],
        description: Optional[str] = None,
    ) -> Playlist:
        """
        Replace name and description wholesale. An omitted description is
        cleared; an omitted name is a validation error.
        """
        username = require_caller(username)
        name, description = validate_playlist_fields(name, description)
        playlist = self.get_playlist(db, playlist_id, username)

        playlist.name = name
        playlist.description = description
        playlist.updated_at = utcnow()
        self._commit(db, "updating playlist")
        db.refresh(playlist)
        logger.info(f"Playlist updated: {playlist_id}")
        return playlist

    def delete_playlist(self, db: Session, playlist_id: int, username: Optional[str]) -> None:
        """Delete a playlist together with its items"""
        playlist = self.get_playlist(db, playlist_id, username)
        db.delete(playlist)
        self._commit(db, "deleting playlist")
        logger.info(f"Playlist deleted: {playlist_id}")

    def add_item(
        self,
        db: Session,
        playlist_id: int,
        username: Optional[str],
        media_id: Optional[str],
        title: Optional[str],
        poster: Optional[str] = None,
        media_type: Optional[str] = None,
    ) -> Playlist:
        """
        Append an item to a playlist.

        A media_id already present raises DuplicateItemError and leaves the
        playlist untouched. The in-memory scan gives the common case a clean
        answer; the (playlist_id, media_id) unique constraint settles
        concurrent inserts that both pass the scan.
        """
        username = require_caller(username)
        media_id, title, poster, media_type = validate_item_fields(media_id, title, poster, media_type)
        playlist = self.get_playlist(db, playlist_id, username)

        if any(item.media_id == media_id for item in playlist.items):
            logger.info(f"Item already in playlist {playlist_id}: {media_id}")
            raise DuplicateItemError()

        now = utcnow()
        playlist.items.append(PlaylistItem(
            media_id=media_id,
            title=title,
            poster=poster,
            media_type=media_type,
            added_at=now,
        ))
        playlist.updated_at = now
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.info(f"Concurrent duplicate rejected for playlist {playlist_id}: {media_id}")
            raise DuplicateItemError()
        except Exception as e:
            db.rollback()
            logger.error(f"Error adding item to playlist: {e}")
            raise
        db.refresh(playlist)
        logger.info(f"Item added to playlist {playlist_id}: {media_id}")
        return playlist

    def remove_item(self, db: Session, playlist_id: int, username: Optional[str], media_id: str) -> Playlist:
        """
        Remove every item with the given media_id. Removing an id that is not
        in the playlist is not an error; updated_at is refreshed either way.
        """
        playlist = self.get_playlist(db, playlist_id, username)

        before = len(playlist.items)
        playlist.items = [item for item in playlist.items if item.media_id != media_id]
        playlist.updated_at = utcnow()
        self._commit(db, "removing item from playlist")
        db.refresh(playlist)
        if len(playlist.items) < before:
            logger.info(f"Item removed from playlist {playlist_id}: {media_id}")
        return playlist

# Create singleton instance
playlist_service = PlaylistService()
