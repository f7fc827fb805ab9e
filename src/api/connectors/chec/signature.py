"""Assinatura HMAC-SHA256 dos webhooks Chec.

A Chec assina o próprio corpo JSON: remove o campo `signature`, serializa o
restante como `JSON.stringify` (sem espaços, chaves na ordem de inserção) e
calcula o HMAC-SHA256 hex com a signing key. A verificação refaz o mesmo
caminho sobre uma cópia do payload.

A serialização é um contrato com o emissor: qualquer diferença de ordem de
chaves ou espaços faz toda verificação falhar.
"""

from __future__ import annotations

import hashlib
import hmac
import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_FIELD = "signature"


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da verificação de assinatura.

    Attributes:
        valid: True se a assinatura confere (ou foi pulada)
        skipped: True quando não há signing key configurada
        error: Código do motivo de falha (sem dados do payload)
    """

    valid: bool
    skipped: bool = False
    error: str | None = None


def serialize_for_signature(
    payload: Mapping[str, Any],
    *,
    sort_keys: bool = False,
) -> bytes:
    """Serializa o payload nos mesmos bytes que o emissor assinou."""
    return json.dumps(
        payload,
        separators=(",", ":"),
        ensure_ascii=False,
        sort_keys=sort_keys,
    ).encode("utf-8")


def compute_signature(
    payload: Mapping[str, Any],
    secret: str,
    *,
    sort_keys: bool = False,
) -> str:
    """Calcula a assinatura hex esperada para um payload sem `signature`."""
    return hmac.new(
        secret.encode("utf-8"),
        serialize_for_signature(payload, sort_keys=sort_keys),
        hashlib.sha256,
    ).hexdigest()


def sign_payload(
    payload: Mapping[str, Any],
    secret: str,
    *,
    sort_keys: bool = False,
) -> dict[str, Any]:
    """Retorna cópia do payload com o campo `signature` preenchido.

    Qualquer `signature` pré-existente é descartada antes do cálculo.
    """
    unsigned = {k: v for k, v in payload.items() if k != SIGNATURE_FIELD}
    return {
        **unsigned,
        SIGNATURE_FIELD: compute_signature(unsigned, secret, sort_keys=sort_keys),
    }


def detach_signature(payload: Mapping[str, Any]) -> tuple[dict[str, Any], object]:
    """Separa a assinatura declarada do restante do payload.

    Returns:
        (cópia do payload sem `signature`, valor declarado ou None)
    """
    unsigned = dict(payload)
    claimed = unsigned.pop(SIGNATURE_FIELD, None)
    return unsigned, claimed


def verify_payload_signature(
    payload: Mapping[str, Any],
    secret: str | None,
    *,
    sort_keys: bool = False,
) -> SignatureResult:
    """Verifica a assinatura embutida no payload.

    O payload recebido não é alterado; o HMAC é calculado sobre uma cópia
    sem o campo `signature`.

    Args:
        payload: Corpo do webhook já parseado
        secret: Signing key. Vazio/None pula a verificação (apenas dev)
        sort_keys: Canonicaliza com chaves ordenadas antes do HMAC

    Returns:
        SignatureResult com valid/skipped/error
    """
    if not secret:
        return SignatureResult(valid=True, skipped=True, error="missing_secret")

    unsigned, claimed = detach_signature(payload)
    if claimed is None or claimed == "":
        return SignatureResult(valid=False, error="missing_signature")
    if not isinstance(claimed, str):
        return SignatureResult(valid=False, error="invalid_signature_format")

    try:
        expected = compute_signature(unsigned, secret, sort_keys=sort_keys)
        claimed_bytes = claimed.encode("utf-8")
    except UnicodeEncodeError:
        return SignatureResult(valid=False, error="invalid_payload_encoding")

    if not hmac.compare_digest(expected.encode("ascii"), claimed_bytes):
        return SignatureResult(valid=False, error="signature_mismatch")

    return SignatureResult(valid=True)
