"""Conector Chec — webhooks de pedidos da plataforma Commerce.js.

Responsabilidades:
- Assinatura HMAC-SHA256 embutida no corpo (campo `signature`)
- Janela de frescor pelo campo `created`
- Parsing seguro do corpo do webhook
"""

from .freshness import FreshnessResult, check_freshness, is_webhook_too_old
from .signature import (
    SignatureResult,
    compute_signature,
    serialize_for_signature,
    sign_payload,
    verify_payload_signature,
)

__all__ = [
    "FreshnessResult",
    "SignatureResult",
    "check_freshness",
    "compute_signature",
    "is_webhook_too_old",
    "serialize_for_signature",
    "sign_payload",
    "verify_payload_signature",
]
