"""Métricas via structured logging.

Cada métrica vira um log com `metric_type`, agregável depois no coletor
de logs (Cloud Logging, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Webhook: contador de desfechos por motivo (received, rejected, ...)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "sms_sender", "chec_webhook")
        operation: Nome da operação (ex: "send_message", "receive")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_webhook_outcome(
    outcome: str,
    reason: str | None = None,
    correlation_id: str | None = None,
) -> None:
    """Registra desfecho de um webhook recebido.

    Args:
        outcome: "accepted", "rejected" ou "accepted_unverified"
        reason: Código do motivo (ex: "signature_mismatch") — sem PII
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, str | None] = {
        "metric_type": "webhook_outcome",
        "component": "chec_webhook",
        "outcome": outcome,
        "correlation_id": correlation_id,
    }
    if reason:
        extra["reason"] = reason

    logger.info("metric_webhook_outcome", extra=extra)
