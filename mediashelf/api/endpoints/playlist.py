# ============================================================================
# FILE: mediashelf/api/endpoints/playlist.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from mediashelf.db.session import get_db
from mediashelf.api.dependencies import get_caller_username
from mediashelf.schemas.playlist import (
    PlaylistWrite,
    PlaylistItemAdd,
    PlaylistResponse,
    MessageResponse
)
from mediashelf.services.playlist_service import playlist_service

router = APIRouter()

@router.get("", response_model=List[PlaylistResponse])
def get_my_playlists(
    db: Session = Depends(get_db),
    username: str = Depends(get_caller_username)
):
    """
    Get all playlists for the caller, most recently modified first
    """
    return playlist_service.get_user_playlists(db, username)

@router.post("", response_model=PlaylistResponse, status_code=status.HTTP_201_CREATED)
def create_playlist(
    playlist_data: PlaylistWrite,
    db: Session = Depends(get_db),
    username: str = Depends(get_caller_username)
):
    return playlist_service.create_playlist(
        db, username, playlist_data.name, playlist_data.description
    )

@router.get("/{playlist_id}", response_model=PlaylistResponse)
def get_playlist(
    playlist_id: int,
    db: Session = Depends(get_db),
    username: str = Depends(get_caller_username)
):
    """
    Get a specific playlist.
    Playlists owned by someone else answer 404, same as missing ones.
    """
    return playlist_service.get_playlist(db, playlist_id, username)

@router.put("/{playlist_id}", response_model=PlaylistResponse)
def update_playlist(
    playlist_id: int,
    update_data: PlaylistWrite,
    db: Session = Depends(get_db),
    username: str = Depends(get_caller_username)
):
    """
    Replace playlist details (name, description)
    """
    return playlist_service.update_playlist(
        db, playlist_id, username, update_data.name, update_data.description
    )

@router.delete("/{playlist_id}", response_model=MessageResponse)
def delete_playlist(
    playlist_id: int,
    db: Session = Depends(get_db),
    username: str = Depends(get_caller_username)
):
    playlist_service.delete_playlist(db, playlist_id, username)
    return {"message": "Playlist deleted"}

@router.post("/{playlist_id}/items", response_model=PlaylistResponse)
def add_item_to_playlist(
    playlist_id: int,
    item: PlaylistItemAdd,
    db: Session = Depends(get_db),
    username: str = Depends(get_caller_username)
):
    """
    Add a movie or TV entry to a playlist.
    Answers 400 if the mediaId is already present.
    """
    return playlist_service.add_item(
        db, playlist_id, username,
        item.media_id, item.title, item.poster, item.media_type
    )

@router.delete("/{playlist_id}/items/{media_id}", response_model=PlaylistResponse)
def remove_item_from_playlist(
    playlist_id: int,
    media_id: str,
    db: Session = Depends(get_db),
    username: str = Depends(get_caller_username)
):
    """
    Remove an entry from a playlist; removing an absent mediaId is a no-op
    """
    return playlist_service.remove_item(db, playlist_id, username, media_id)
