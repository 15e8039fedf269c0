from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from vkapi.core.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class InfoResponse(BaseModel):
    application: str
    version: str
    environment: str
    timestamp: str


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", response_class=PlainTextResponse, include_in_schema=False)
async def health():
    """Process liveness probe for load balancers."""
    return "Healthy"


@router.get("/api/health", response_model=HealthResponse, operation_id="HealthCheck")
async def api_health():
    return HealthResponse(status="Healthy", timestamp=_utc_now())


@router.get("/api/info", response_model=InfoResponse, operation_id="ApiInfo")
async def api_info():
    return InfoResponse(
        application=settings.app_name,
        version=settings.app_version,
        environment=settings.env,
        timestamp=_utc_now(),
    )
