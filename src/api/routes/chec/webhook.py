"""Endpoint de webhook da Chec.

Fluxo do POST:
1. Lê o corpo inteiro (sem parse incremental)
2. Parseia JSON e verifica assinatura HMAC + frescor de `created`
3. Formata a notificação do pedido
4. Agenda o envio do SMS em background (fire-and-forget)
5. Responde 200 com corpo vazio, sem esperar o envio

Falhas:
- JSON inválido: 400
- Assinatura inválida: 401 (modo `reject`)
- Webhook velho: 400 (modo `reject`)
- No modo `log_only` as falhas de verificação só são logadas e o SMS
  é enviado mesmo assim
- Falha no provedor de SMS nunca altera a resposta já enviada
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Request, Response, status

from api.connectors.chec.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    StaleWebhookError,
    WebhookVerification,
    parse_webhook_request,
)
from api.routes.chec.webhook_tasks import schedule_send_task
from app.bootstrap import get_notify_order_use_case
from app.observability import (
    get_correlation_id,
    record_latency,
    record_webhook_outcome,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_webhook_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _log_verification_failures(verification: WebhookVerification) -> None:
    """Modo `log_only`: registra falhas que não abortam o envio."""
    if not verification.signature.valid:
        logger.error(
            "webhook_signature_invalid",
            extra={
                "channel": "chec",
                "error": verification.signature.error,
                "enforced": False,
            },
        )
    if not verification.freshness.fresh:
        logger.error(
            "webhook_stale",
            extra={
                "channel": "chec",
                "error": verification.freshness.error,
                "age_seconds": verification.freshness.age_seconds,
                "enforced": False,
            },
        )


@router.post("/", response_model=None)
@router.post("/webhook/chec", response_model=None)
async def receive_webhook(request: Request) -> Response:
    """Recebe um evento de pedido da Chec e dispara o SMS.

    Returns:
        200 vazio quando aceito; 400/401 em corpo inválido ou verificação
        recusada.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    started_at = time.perf_counter()

    try:
        settings = get_webhook_settings()
        raw_body = await request.body()

        try:
            payload, verification = parse_webhook_request(
                raw_body,
                signing_key=settings.signing_key or None,
                max_age_seconds=settings.max_age_seconds,
                sort_keys=settings.canonical_sort_keys,
                enforce=settings.rejects_invalid,
                now=time.time(),
            )
        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={"channel": "chec", "error": str(exc), "payload_size": len(raw_body)},
            )
            record_webhook_outcome("rejected", str(exc), get_correlation_id())
            return Response(status_code=status.HTTP_400_BAD_REQUEST)
        except InvalidSignatureError as exc:
            logger.warning(
                "webhook_signature_invalid",
                extra={"channel": "chec", "error": str(exc), "enforced": True},
            )
            record_webhook_outcome("rejected", str(exc), get_correlation_id())
            return Response(status_code=status.HTTP_401_UNAUTHORIZED)
        except StaleWebhookError as exc:
            logger.warning(
                "webhook_stale",
                extra={"channel": "chec", "error": str(exc), "enforced": True},
            )
            record_webhook_outcome("rejected", str(exc), get_correlation_id())
            return Response(status_code=status.HTTP_400_BAD_REQUEST)

        logger.info(
            "webhook_received",
            extra={
                "channel": "chec",
                "event": payload.get("event"),
                "signature_valid": verification.signature.valid,
                "signature_skipped": verification.signature.skipped,
                "fresh": verification.freshness.fresh,
                "payload_size": len(raw_body),
            },
        )
        if verification.signature.skipped:
            logger.warning(
                "webhook_signature_skipped",
                extra={"channel": "chec", "reason": verification.signature.error},
            )
        if not verification.trusted:
            _log_verification_failures(verification)

        use_case = get_notify_order_use_case()
        message = use_case.build_message(payload)
        schedule_send_task(
            correlation_id=get_correlation_id(),
            coroutine=use_case.execute(message, correlation_id=get_correlation_id()),
        )

        record_webhook_outcome(
            "accepted" if verification.trusted else "accepted_unverified",
            correlation_id=get_correlation_id(),
        )
        logger.info(
            "webhook_processed",
            extra={
                "channel": "chec",
                "response_code": payload.get("response_code"),
                "event": payload.get("event"),
            },
        )
        return Response(status_code=status.HTTP_200_OK)

    finally:
        record_latency(
            "chec_webhook",
            "receive",
            (time.perf_counter() - started_at) * 1000,
            get_correlation_id(),
        )
        reset_correlation_id(token)
