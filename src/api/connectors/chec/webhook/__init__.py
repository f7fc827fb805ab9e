"""Webhook Chec: parsing seguro e verificação de assinatura e frescor."""

from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    StaleWebhookError,
    WebhookRequestError,
    WebhookVerification,
    parse_webhook_body,
    parse_webhook_request,
    verify_webhook_payload,
)

__all__ = [
    "InvalidJsonError",
    "InvalidSignatureError",
    "StaleWebhookError",
    "WebhookRequestError",
    "WebhookVerification",
    "parse_webhook_body",
    "parse_webhook_request",
    "verify_webhook_payload",
]
