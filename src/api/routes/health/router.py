"""Endpoint de health check."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from api.routes.chec.webhook_tasks import active_task_count

router = APIRouter()

SERVICE_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = SERVICE_VERSION
    pending_sms: int = 0


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o processo está respondendo."""
    return HealthResponse(
        status="healthy",
        service="chec-sms-notifier",
        timestamp=datetime.now(UTC).isoformat(),
        pending_sms=active_task_count(),
    )
