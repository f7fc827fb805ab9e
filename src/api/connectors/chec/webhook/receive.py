"""Parse e verificação inicial do webhook Chec (sem PII)."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, NoReturn

from ..freshness import FreshnessResult, check_freshness
from ..signature import SignatureResult, detach_signature, verify_payload_signature


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidJsonError(WebhookRequestError):
    """Corpo do webhook não é JSON ou não é objeto."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura ausente ou divergente."""


class StaleWebhookError(WebhookRequestError):
    """Campo `created` fora da janela de frescor."""


@dataclass(frozen=True, slots=True)
class WebhookVerification:
    """Resultado combinado de assinatura e frescor."""

    signature: SignatureResult
    freshness: FreshnessResult

    @property
    def trusted(self) -> bool:
        """True se o webhook passou nas duas checagens."""
        return self.signature.valid and self.freshness.fresh


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"constante JSON não suportada: {name}")


def parse_webhook_body(raw_body: bytes) -> dict[str, Any]:
    """Parseia o corpo completo do webhook.

    Rejeita também `NaN`/`Infinity` e strings com surrogates isolados,
    que não podem ser serializadas de volta em UTF-8 para o HMAC.

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto
    """
    try:
        payload = json.loads(raw_body, parse_constant=_reject_constant)
    except ValueError as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    try:
        json.dumps(payload, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidJsonError("invalid_payload_encoding") from exc

    return payload


def verify_webhook_payload(
    payload: dict[str, Any],
    *,
    signing_key: str | None,
    max_age_seconds: float,
    sort_keys: bool = False,
    now: float | None = None,
) -> WebhookVerification:
    """Executa assinatura e frescor sem levantar exceção."""
    return WebhookVerification(
        signature=verify_payload_signature(payload, signing_key, sort_keys=sort_keys),
        freshness=check_freshness(payload.get("created"), max_age_seconds, now=now),
    )


def parse_webhook_request(
    raw_body: bytes,
    *,
    signing_key: str | None,
    max_age_seconds: float,
    sort_keys: bool = False,
    enforce: bool = True,
    now: float | None = None,
) -> tuple[dict[str, Any], WebhookVerification]:
    """Parseia o corpo, verifica assinatura e frescor.

    Args:
        raw_body: Corpo bruto do request (já lido por completo)
        signing_key: Segredo compartilhado com a Chec
        max_age_seconds: Idade máxima aceita para `created`
        sort_keys: Canonicalização com chaves ordenadas
        enforce: Se False, falhas de verificação só aparecem no resultado
        now: Epoch atual (injeção para testes)

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto
        InvalidSignatureError: Se enforce e a assinatura falhar
        StaleWebhookError: Se enforce e o webhook estiver velho

    Returns:
        (payload sem `signature`, WebhookVerification)
    """
    payload = parse_webhook_body(raw_body)
    verification = verify_webhook_payload(
        payload,
        signing_key=signing_key,
        max_age_seconds=max_age_seconds,
        sort_keys=sort_keys,
        now=now,
    )

    if enforce and not verification.signature.valid:
        raise InvalidSignatureError(verification.signature.error or "invalid_signature")
    if enforce and not verification.freshness.fresh:
        raise StaleWebhookError(verification.freshness.error or "stale_webhook")

    unsigned, _ = detach_signature(payload)
    return unsigned, verification
