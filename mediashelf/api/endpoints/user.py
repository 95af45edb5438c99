# ============================================================================
# FILE: mediashelf/api/endpoints/user.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from mediashelf.db.session import get_db
from mediashelf.schemas.user import UserCredentials, SignupResponse, LoginResponse
from mediashelf.services.user_service import user_service
from mediashelf.core.security import create_access_token
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(
    credentials: UserCredentials,
    db: Session = Depends(get_db)
):
    """
    Register a new user account
    """
    user = user_service.create_user(db, credentials.username, credentials.password)
    return {"message": "User created successfully", "username": user.username}

@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserCredentials,
    db: Session = Depends(get_db)
):
    """
    Login with username and password.
    Returns the canonical username plus a bearer token for callers that
    want signed identity instead of the username header.
    """
    user = user_service.authenticate_user(db, credentials.username, credentials.password)
    access_token = create_access_token(data={"sub": user.username})
    logger.info(f"User logged in: {user.username}")
    return {
        "message": "Login successful",
        "username": user.username,
        "access_token": access_token,
        "token_type": "bearer",
    }
