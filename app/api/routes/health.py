'''
Liveness and database connectivity checks.
'''
import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.session import get_db, ping

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

SERVICE = "naricare-emotion-api"

@router.get("/health")
def health():
    """
    Liveness probe. Does not touch the database.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "message": "API is running",
        "service": SERVICE,
    }

@router.get("/health/full")
def health_full(db: Session = Depends(get_db)):
    """
    Verifies both API and database connectivity.
    """
    connected = ping(db)
    if connected:
        logger.info("Database health check successful")
    return {
        "status": "healthy" if connected else "unhealthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected" if connected else "disconnected",
        "service": SERVICE,
    }
