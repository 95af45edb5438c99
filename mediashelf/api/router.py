# ============================================================================
# FILE: mediashelf/api/router.py
# ============================================================================
from fastapi import APIRouter
from mediashelf.api.endpoints import playlist, user

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(user.router, tags=["user"])
api_router.include_router(playlist.router, prefix="/playlists", tags=["playlist"])
