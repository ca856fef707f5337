"""
Admin endpoints
===============

GET /api/v1/admin/health     -- simple health check
GET /api/v1/admin/map-config -- initial map center and zoom
"""

from fastapi import APIRouter

from src.api.schemas import HealthResponse, LocationSchema, MapConfigResponse
from src.config import settings

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()


@router.get(
    "/map-config",
    response_model=MapConfigResponse,
    summary="Initial map options",
)
async def map_config():
    return MapConfigResponse(
        center=LocationSchema(
            latitude=settings.map_center_lat, longitude=settings.map_center_lng
        ),
        zoom=settings.map_zoom,
    )
