"""Janela de frescor dos webhooks Chec.

O campo `created` traz o epoch (segundos) em que a Chec gerou o evento.
Webhook é velho demais quando `agora - created > max_age`; idade exatamente
igual ao limite ainda é aceita. Não há compensação de clock skew entre
emissor e receptor.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Any

from config.settings.webhook import DEFAULT_MAX_AGE_SECONDS


@dataclass(frozen=True, slots=True)
class FreshnessResult:
    """Resultado da checagem de frescor."""

    fresh: bool
    age_seconds: float | None = None
    error: str | None = None


def parse_created(value: Any) -> float | None:
    """Converte `created` para epoch em segundos; None se inválido."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        created = float(value)
    elif isinstance(value, str):
        try:
            created = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return created if math.isfinite(created) else None


def is_webhook_too_old(
    created: float,
    max_age_seconds: float = DEFAULT_MAX_AGE_SECONDS,
    *,
    now: float | None = None,
) -> bool:
    """True quando `now - created > max_age_seconds`."""
    now_ts = time.time() if now is None else now
    return now_ts - created > max_age_seconds


def check_freshness(
    created_value: Any,
    max_age_seconds: float = DEFAULT_MAX_AGE_SECONDS,
    *,
    now: float | None = None,
) -> FreshnessResult:
    """Avalia o campo `created` de um payload.

    `created` ausente ou não numérico é tratado como não-fresco.
    """
    created = parse_created(created_value)
    if created is None:
        return FreshnessResult(fresh=False, error="invalid_created")

    now_ts = time.time() if now is None else now
    age = now_ts - created
    if is_webhook_too_old(created, max_age_seconds, now=now_ts):
        return FreshnessResult(fresh=False, age_seconds=age, error="stale_webhook")
    return FreshnessResult(fresh=True, age_seconds=age)
