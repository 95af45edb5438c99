
# ============================================================================
# FILE: mediashelf/db/models/user.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime, timezone
from mediashelf.db.base import Base

class User(Base):
    """Account record used only at signup and login"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
