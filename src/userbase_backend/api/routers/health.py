"""Health and readiness endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from userbase_backend.api.dependencies import SettingsDep
from userbase_backend.database import DatabaseService, get_database
from userbase_backend.logging import get_logger

router = APIRouter(tags=["diagnostics"])

_logger = get_logger("health")


@router.get("/health", summary="Liveness probe")
async def health_check(settings: SettingsDep) -> dict[str, str]:
    """Signal that the API process is running."""

    return {
        "status": "ok",
        "service": settings.app_name,
        "environment": settings.environment,
    }


@router.get("/readiness", summary="Readiness probe")
async def readiness_check(
    database: Annotated[DatabaseService, Depends(get_database)],
) -> dict[str, str]:
    """Signal that the data store answers queries."""

    try:
        await database.ping()
    except (SQLAlchemyError, OSError) as exc:
        _logger.warning("Readiness check failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable",
        ) from exc
    return {"status": "ready"}
