from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.config import settings
from app.dependencies import get_category_repository

router = APIRouter()


@router.get("/")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "service": "notes-graph-api",
            "version": "0.1.0"
        }
    )


@router.get("/ready")
async def readiness_check():
    """Readiness check endpoint; pings the configured storage backend."""
    db_status = "connected"
    try:
        await get_category_repository().list(limit=1)
    except Exception as e:
        db_status = f"error: {str(e)}"

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "ready",
            "database": db_status,
            "storage_backend": settings.storage_backend,
            "graphql_path": settings.graphql_path,
            "api_prefix": settings.api_prefix
        }
    )
