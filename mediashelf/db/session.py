# ============================================================================
# FILE: mediashelf/db/session.py
# ============================================================================
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from mediashelf.config import settings

def build_engine(url: str, **kwargs):
    """Create an engine; SQLite connections are shared across worker threads"""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True, **kwargs)

def build_sessionmaker(bind) -> sessionmaker:
    # Objects stay readable after commit so responses can be serialized
    # once the request session is gone
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)

engine = build_engine(settings.DATABASE_URL)
SessionLocal = build_sessionmaker(engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
