# ============================================================================
# FILE: mediashelf/schemas/user.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional

class UserCredentials(BaseModel):
    """Schema for signup and login; presence is checked by the service layer"""
    username: Optional[str] = None
    password: Optional[str] = None

class SignupResponse(BaseModel):
    message: str
    username: str

class LoginResponse(BaseModel):
    """Login result; the token is only required when REQUIRE_TOKEN is enabled"""
    message: str
    username: str
    access_token: str
    token_type: str = "bearer"
