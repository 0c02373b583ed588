from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from datetime import datetime
from sqlalchemy import text
from sqlalchemy.orm import Session
import structlog
from app.config.settings import settings
from app.core.database import get_database
from app.core.dependencies import get_ai_service
from app.repositories.interfaces.ai_service import IAIService

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    environment: str
    generator_profile: str


@router.get("/", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.utcnow(),
        version="1.0.0",
        environment=settings.environment,
        generator_profile=settings.generator_profile,
    )


@router.get("/readiness")
async def readiness_check(
    db: Session = Depends(get_database),
    ai_service: IAIService = Depends(get_ai_service),
):
    """Readiness check endpoint.

    The AI provider is informational only: generation always succeeds through
    the keyword fallback, so an unconfigured provider does not make the
    service unready.
    """
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except Exception as e:
        logger.error("Database readiness check failed", error=str(e))
        database = "error"

    checks = {
        "database": database,
        "ai_provider": "ok" if ai_service.is_configured else "not_configured",
    }

    return {
        "status": "ready" if database == "ok" else "not_ready",
        "checks": checks,
        "timestamp": datetime.utcnow(),
    }
