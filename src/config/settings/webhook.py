"""Settings do webhook da Chec (Commerce.js).

Chave de assinatura HMAC, janela de frescor e política de rejeição.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

EnforcementMode = Literal["reject", "log_only"]

DEFAULT_MAX_AGE_SECONDS: int = 5 * 60


@dataclass(frozen=True)
class WebhookSettings:
    """Configurações de verificação do webhook.

    Attributes:
        signing_key: Segredo compartilhado usado no HMAC-SHA256
        max_age_seconds: Idade máxima aceita para o campo `created`
        enforcement_mode: `reject` responde 4xx e não envia SMS quando a
            assinatura ou o frescor falham; `log_only` apenas loga e segue
        canonical_sort_keys: Serializa com chaves ordenadas antes do HMAC
            (só quando o emissor também canonicaliza)
    """

    signing_key: str = ""
    max_age_seconds: int = DEFAULT_MAX_AGE_SECONDS
    enforcement_mode: EnforcementMode = "reject"
    canonical_sort_keys: bool = False

    @property
    def rejects_invalid(self) -> bool:
        """True quando falhas de verificação abortam a requisição.

        Só `log_only` desliga a rejeição; valor desconhecido rejeita.
        """
        return self.enforcement_mode != "log_only"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do webhook.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.signing_key:
            errors.append("CHEC_WEBHOOK_SIGNING_KEY não configurado")

        if self.max_age_seconds <= 0:
            errors.append("CHEC_WEBHOOK_MAX_AGE_SECONDS deve ser > 0")

        if self.enforcement_mode not in ("reject", "log_only"):
            errors.append(
                "CHEC_WEBHOOK_ENFORCEMENT_MODE deve ser 'reject' ou 'log_only'"
            )

        return errors


def _load_from_env() -> WebhookSettings:
    """Carrega WebhookSettings a partir de variáveis de ambiente."""
    mode = os.getenv("CHEC_WEBHOOK_ENFORCEMENT_MODE", "reject").strip().lower()
    return WebhookSettings(
        signing_key=os.getenv("CHEC_WEBHOOK_SIGNING_KEY", ""),
        max_age_seconds=int(
            os.getenv("CHEC_WEBHOOK_MAX_AGE_SECONDS", str(DEFAULT_MAX_AGE_SECONDS))
        ),
        enforcement_mode=mode,  # type: ignore[arg-type]
        canonical_sort_keys=os.getenv("CHEC_WEBHOOK_SORT_KEYS", "").lower()
        in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_webhook_settings() -> WebhookSettings:
    """Retorna instância cacheada de WebhookSettings."""
    return _load_from_env()
