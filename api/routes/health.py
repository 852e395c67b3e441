"""Health check and utility routes"""

from fastapi import APIRouter, Depends
import logging

from api.dependencies import get_engine
from api.responses import HealthResponse
from app.config import settings
from services.protocol_service import ProtocolEngine

router = APIRouter(tags=["Health"])
logger = logging.getLogger("mealprotocol.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check(engine: ProtocolEngine = Depends(get_engine)):
    """Basic health check endpoint"""
    return HealthResponse(
        status="ok",
        service=settings.app_name,
        version=settings.app_version,
        catalog_version=engine.catalog_version,
    )
