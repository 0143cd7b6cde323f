"""
Video Vault - FastAPI Application Entry Point

Private video hosting: folders of videos with role-based and per-folder
editor permissions, plus per-user viewing progress.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .database import init_db
from .exceptions import register_exception_handlers
from .logging_config import configure_logging
from .migrations.add_soft_delete_columns import migrate as migrate_soft_delete_columns
from .routers import folders, videos

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    configure_logging(settings.LOG_LEVEL)
    # Startup: Initialize database
    init_db()
    # Run migrations for existing databases
    migrate_soft_delete_columns()
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Private video hosting with hierarchical folder permissions",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register global exception handlers
register_exception_handlers(app)


@app.get("/")
async def root():
    """Root endpoint returning API information."""
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Register routers
app.include_router(folders.router)
app.include_router(videos.router)
