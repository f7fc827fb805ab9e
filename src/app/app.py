"""Entrypoint do notificador de pedidos Chec → SMS.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from api.routes.chec.webhook_tasks import drain_send_tasks
from app.bootstrap import initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Logging configurado ANTES de qualquer log do processo
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Ciclo de vida: valida settings no startup, drena envios no shutdown."""
    logger.info("app_starting")
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down")
    await drain_send_tasks(timeout_seconds=30.0)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="chec-sms-notifier",
        description="Recebe webhooks de pedidos da Chec e avisa por SMS",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Sobe o listener HTTP na porta configurada."""
    import uvicorn

    settings = get_base_settings()
    logger.info(
        "listening_for_webhooks",
        extra={"host": settings.host, "port": settings.port},
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
