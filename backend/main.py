"""
Note Review Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import config, review
from services.config_manager import ConfigManager
from services.logging_utils import configure_logging
from services.pending_changes import PendingChangeStore

logger = logging.getLogger("backend")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    config_manager = ConfigManager.get_instance()
    configure_logging(config_manager.get("logging", {}).get("level", "INFO"))
    logger.info("Starting Note Review Backend (config: %s)", config_manager.config_file)

    PendingChangeStore.get_instance()
    logger.info("PendingChangeStore initialized")

    yield
    pending = len(PendingChangeStore.get_instance().list_changes())
    logger.info("Shutting down Note Review Backend (%d unreviewed changes dropped)", pending)


app = FastAPI(
    title="Note Review Backend",
    description="Review engine for AI-proposed edits to note files",
    version="1.0.0",
    lifespan=lifespan,
)

# The desktop shell talks to the backend from a local webview
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(review.router, prefix="/api/review", tags=["review"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "note-review-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "127.0.0.1"), port=server.get("port", 8000))
