"""Use case: notificar novo pedido por SMS."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.domain.order_notification import OutboundMessage, format_order_notification
from app.observability import record_latency
from utils.errors import SmsSendError

if TYPE_CHECKING:
    from app.protocols.sms_sender import SmsSenderProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SmsSendOutcome:
    """Resultado do envio (usado só para observabilidade)."""

    success: bool
    message_sid: str | None = None
    error: str | None = None
    provider_error_code: int | None = None


class NotifyOrderUseCase:
    """Formata a notificação do pedido e envia ao número configurado."""

    def __init__(
        self,
        sender: SmsSenderProtocol,
        *,
        to_number: str,
        from_number: str,
    ) -> None:
        self._sender = sender
        self._to_number = to_number
        self._from_number = from_number

    def build_message(self, webhook: dict[str, Any]) -> OutboundMessage:
        """Monta a mensagem a partir do payload verificado."""
        return OutboundMessage(
            body=format_order_notification(webhook),
            to=self._to_number,
            from_=self._from_number,
        )

    async def execute(
        self,
        message: OutboundMessage,
        correlation_id: str | None = None,
    ) -> SmsSendOutcome:
        """Envia a mensagem; falhas do provedor viram log, nunca exceção."""
        started_at = time.perf_counter()
        try:
            message_sid = await self._sender.send_message(
                message.body,
                message.to,
                message.from_,
            )
        except SmsSendError as exc:
            logger.error(
                "sms_send_failed",
                extra={
                    "correlation_id": correlation_id,
                    "error": str(exc),
                    "status_code": exc.status_code,
                    "provider_error_code": exc.error_code,
                },
            )
            return SmsSendOutcome(
                success=False,
                error=str(exc),
                provider_error_code=exc.error_code,
            )
        finally:
            record_latency(
                "sms_sender",
                "send_message",
                (time.perf_counter() - started_at) * 1000,
                correlation_id,
            )

        logger.info(
            "sms_sent",
            extra={"correlation_id": correlation_id, "message_sid": message_sid},
        )
        return SmsSendOutcome(success=True, message_sid=message_sid)
