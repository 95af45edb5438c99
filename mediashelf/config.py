# ============================================================================
# FILE: mediashelf/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""

    # App settings
    APP_NAME: str = "Mediashelf"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Database
    DATABASE_URL: str = "sqlite:///./mediashelf.db"  # Change to PostgreSQL in production

    # Security
    BCRYPT_ROUNDS: int = 10
    SECRET_KEY: str = "your-secret-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    # When enabled the bare `username` header is no longer trusted and every
    # playlist call must carry the bearer token issued at login
    REQUIRE_TOKEN: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
