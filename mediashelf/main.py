# ============================================================================
# FILE: mediashelf/main.py
# ============================================================================
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from mediashelf.api.router import api_router
from mediashelf.core.exceptions import AppError, InternalError
from mediashelf.core.logging import setup_logging
from mediashelf.config import settings
import logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup"""
    logger.info(f"Starting {settings.APP_NAME} API")
    from mediashelf.db.base import Base
    from mediashelf.db.session import engine
    Base.metadata.create_all(bind=engine)
    yield
    logger.info(f"Shutting down {settings.APP_NAME} API")

# Create FastAPI app instance
app = FastAPI(
    title="Mediashelf API",
    description="User accounts and movie/TV playlists",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )

@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    # Store diagnostics go to the log only
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"message": error.message})

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"message": error.message})

app.include_router(api_router)

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

def run():
    """Console entry point: serve the app with uvicorn"""
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
