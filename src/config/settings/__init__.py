"""Agregador de settings do notificador.

Re-exporta as settings de cada módulo. Todas são dataclasses imutáveis
carregadas do ambiente uma única vez (lru_cache).
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_PORT,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.sms import (
    TWILIO_API_BASE_URL,
    TWILIO_API_VERSION,
    SmsSettings,
    get_sms_settings,
)
from config.settings.webhook import (
    DEFAULT_MAX_AGE_SECONDS,
    EnforcementMode,
    WebhookSettings,
    get_webhook_settings,
)

__all__ = [
    "DEFAULT_MAX_AGE_SECONDS",
    "DEFAULT_PORT",
    "TWILIO_API_BASE_URL",
    "TWILIO_API_VERSION",
    "BaseSettings",
    "EnforcementMode",
    "Environment",
    "SmsSettings",
    "WebhookSettings",
    "get_base_settings",
    "get_sms_settings",
    "get_webhook_settings",
]
