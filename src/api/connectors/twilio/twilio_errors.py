"""Erros e helpers de parsing para a API Twilio."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TwilioApiError:
    """Erro retornado pela API Twilio."""

    status_code: int
    error_code: int
    more_info: str
    is_permanent: bool  # True se reenviar o mesmo pedido não muda o resultado


def is_permanent_error(status_code: int) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros permanentes: 4xx exceto 429
    Erros transitórios: 429 (rate limit), 5xx
    """
    if status_code == 429:
        return False
    return 400 <= status_code < 500


def parse_twilio_error(status_code: int, response_data: Any) -> TwilioApiError:
    """Extrai código de erro do response da Twilio.

    A mensagem textual não é guardada: a Twilio costuma ecoar o número
    de telefone nela.

    Args:
        status_code: Status HTTP da resposta
        response_data: JSON decodificado (ou qualquer coisa, se não for JSON)
    """
    data = response_data if isinstance(response_data, dict) else {}
    raw_code = data.get("code")
    error_code = raw_code if isinstance(raw_code, int) else 0
    more_info = data.get("more_info") if isinstance(data.get("more_info"), str) else ""

    return TwilioApiError(
        status_code=status_code,
        error_code=error_code,
        more_info=more_info,
        is_permanent=is_permanent_error(status_code),
    )
