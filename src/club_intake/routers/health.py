import os
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException
from sqlmodel import Session, text

from club_intake.config import config
from club_intake.models.database import get_engine

health = APIRouter(tags=["Health"])


@health.get("/health")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": "club-intake",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": config["environment"],
    }


@health.get("/health/detailed")
async def detailed_health_check():
    """Detailed health check with database and configuration checks"""
    health_status = {
        "status": "healthy",
        "service": "club-intake",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": config["environment"],
        "checks": {},
    }

    # Database connectivity check
    try:
        with Session(get_engine()) as session:
            result = session.exec(text("SELECT 1")).first()
            health_status["checks"]["database"] = "healthy" if result else "unhealthy"
    except Exception as e:
        health_status["checks"]["database"] = f"unhealthy: {str(e)}"
        health_status["status"] = "unhealthy"

    # Environment variables check
    required_env_vars = ["DATABASE_URL", "ADMIN_SECRET_CODE", "CRON_SECRET"]
    missing_vars = [var for var in required_env_vars if not os.getenv(var)]
    if missing_vars:
        health_status["checks"]["environment"] = f"missing: {', '.join(missing_vars)}"
        health_status["status"] = "unhealthy"
    else:
        health_status["checks"]["environment"] = "healthy"

    if health_status["status"] == "unhealthy":
        raise HTTPException(status_code=503, detail=health_status)

    return health_status
