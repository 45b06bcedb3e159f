# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Avatar Studio API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.dependencies import get_context
from app.routers import avatars, health, media, videos, voices

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: create the process-wide client context (clients stay unbuilt
      until first use)
    - Shutdown: release the HTTP connection pool
    """
    logger.info(f"Starting Avatar Studio API in {settings.ENVIRONMENT} mode")
    context = get_context()

    yield

    logger.info("Shutting down Avatar Studio API")
    context.close()


# Create FastAPI application
app = FastAPI(
    title="Avatar Studio API",
    description="""
## Server-side operations for the avatar/video studio

Every operation answers with the same envelope:

| Outcome | Body |
|---------|------|
| success | `{"success": true, ...payload}` |
| failure | `{"success": false, "error": "message"}` |

Branch on `success`; the HTTP status is 200 either way.
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Avatars",
            "description": "Rename and delete photo avatars",
        },
        {
            "name": "Voices",
            "description": "Update and delete cloned voices",
        },
        {
            "name": "Videos",
            "description": "Editor drafts, generation jobs and the video library",
        },
        {
            "name": "Media",
            "description": "Upload and delete editor media",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Last-resort handler; operations themselves never raise."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Unknown server error"},
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(health.router, prefix="/api/v1", tags=["Health"])

app.include_router(avatars.router, prefix="/api/v1/avatars", tags=["Avatars"])

app.include_router(voices.router, prefix="/api/v1/voices", tags=["Voices"])

app.include_router(videos.router, prefix="/api/v1/videos", tags=["Videos"])

app.include_router(media.router, prefix="/api/v1/media", tags=["Media"])


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Avatar Studio API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
