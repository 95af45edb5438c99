# ============================================================================
# FILE: mediashelf/services/user_service.py
# ============================================================================
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from mediashelf.db.models.user import User
from mediashelf.core.exceptions import (
    AlreadyExistsError,
    UserNotFoundError,
    InvalidCredentialsError,
)
from mediashelf.core.security import get_password_hash, verify_password
from mediashelf.core.validation import validate_credentials
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Credential store: registers users and verifies passwords"""

    def create_user(self, db: Session, username: Optional[str], password: Optional[str]) -> User:
        """
        Register a new user account.
        Raises ValidationError for blank fields and AlreadyExistsError when
        the username is taken (including a concurrent signup losing the race
        on the unique index).
        """
        username, password = validate_credentials(username, password)

        if self.get_user_by_username(db, username):
            raise AlreadyExistsError()

        user = User(username=username, password_hash=get_password_hash(password))
        try:
            db.add(user)
            db.commit()
            db.refresh(user)
        except IntegrityError:
            db.rollback()
            logger.info(f"Signup race lost for username: {username}")
            raise AlreadyExistsError()
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise
        logger.info(f"User created: {user.username}")
        return user

    def get_user_by_username(self, db: Session, username: str) -> Optional[User]:
        """Get user by exact username"""
        return db.query(User).filter(User.username == username).first()

    def authenticate_user(self, db: Session, username: Optional[str], password: Optional[str]) -> User:
        """
        Verify a username/password pair.
        Unknown usernames raise UserNotFoundError; a wrong password for an
        existing user always raises InvalidCredentialsError.
        """
        username, password = validate_credentials(username, password)

        user = self.get_user_by_username(db, username)
        if not user:
            raise UserNotFoundError()
        if not verify_password(password, user.password_hash):
            logger.info(f"Rejected login for {username}: bad password")
            raise InvalidCredentialsError()
        return user

# Create singleton instance
user_service = UserService()
