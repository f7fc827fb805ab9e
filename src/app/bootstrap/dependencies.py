"""Factories — criação das implementações concretas a partir das settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.twilio import TwilioSmsClient
from app.use_cases.chec import NotifyOrderUseCase
from config.settings import get_sms_settings

if TYPE_CHECKING:
    from app.protocols.sms_sender import SmsSenderProtocol
    from config.settings import SmsSettings

logger = logging.getLogger(__name__)


def create_sms_sender(settings: SmsSettings | None = None) -> SmsSenderProtocol:
    """Cria o cliente do provedor de SMS (Twilio)."""
    return TwilioSmsClient(settings or get_sms_settings())


def create_notify_order_use_case(
    sender: SmsSenderProtocol | None = None,
    settings: SmsSettings | None = None,
) -> NotifyOrderUseCase:
    """Monta o use case de notificação com remetente/destino configurados."""
    sms_settings = settings or get_sms_settings()
    use_case = NotifyOrderUseCase(
        sender or create_sms_sender(sms_settings),
        to_number=sms_settings.to_number,
        from_number=sms_settings.from_number,
    )
    logger.debug("notify_order_use_case_created", extra={"component": "bootstrap"})
    return use_case
