"""Agregador de rotas — registra os routers de cada canal.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.chec.router import router as chec_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    api_router.include_router(health_router, tags=["health"])

    # Chec: POST / e POST /webhook/chec
    api_router.include_router(chec_router, tags=["chec"])

    return api_router
