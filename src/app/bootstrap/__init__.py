"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e entrega o use case
de notificação já ligado ao provedor de SMS.

Uso:
    from app.bootstrap import initialize_app, get_notify_order_use_case

    initialize_app()
    use_case = get_notify_order_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_sms_settings, get_webhook_settings

if TYPE_CHECKING:
    from app.use_cases.chec import NotifyOrderUseCase

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id.

    Deve ser chamada uma vez no início do processo.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"webhook: {error}" for error in get_webhook_settings().validate())
    errors.extend(f"sms: {error}" for error in get_sms_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_notify_order_use_case() -> NotifyOrderUseCase:
    """Obtém o use case de notificação (singleton)."""
    from app.bootstrap.dependencies import create_notify_order_use_case

    return create_notify_order_use_case()
