"""Settings do canal SMS (Twilio).

Credenciais da conta, números de origem/destino e timeout da chamada.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TWILIO_API_BASE_URL: str = "https://api.twilio.com"
TWILIO_API_VERSION: str = "2010-04-01"


@dataclass(frozen=True)
class SmsSettings:
    """Configurações do canal SMS.

    Attributes:
        account_sid: Account SID (Twilio)
        auth_token: Auth Token (Twilio)
        from_number: Número registrado no provedor, usado como remetente
        to_number: Número que recebe as notificações de pedido
        api_base_url: URL base da API do provedor
        request_timeout_seconds: Timeout da requisição de envio
    """

    account_sid: str = ""
    auth_token: str = ""
    from_number: str = ""
    to_number: str = ""
    api_base_url: str = TWILIO_API_BASE_URL
    request_timeout_seconds: float = 30.0

    @property
    def messages_endpoint(self) -> str:
        """URL de criação de mensagens da conta configurada."""
        return (
            f"{self.api_base_url}/{TWILIO_API_VERSION}"
            f"/Accounts/{self.account_sid}/Messages.json"
        )

    def validate(self) -> list[str]:
        """Valida configurações mínimas de SMS."""
        errors: list[str] = []

        if not self.account_sid:
            errors.append("SMS_ACCOUNT_SID não configurado")
        if not self.auth_token:
            errors.append("SMS_AUTH_TOKEN não configurado")
        if not self.from_number:
            errors.append("SMS_FROM_NUMBER não configurado")
        if not self.to_number:
            errors.append("SMS_TO_NUMBER não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("SMS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> SmsSettings:
    """Carrega SmsSettings de variáveis de ambiente."""
    return SmsSettings(
        account_sid=os.getenv("SMS_ACCOUNT_SID", ""),
        auth_token=os.getenv("SMS_AUTH_TOKEN", ""),
        from_number=os.getenv("SMS_FROM_NUMBER", ""),
        to_number=os.getenv("SMS_TO_NUMBER", ""),
        api_base_url=os.getenv("SMS_API_BASE_URL", TWILIO_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("SMS_REQUEST_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_sms_settings() -> SmsSettings:
    """Retorna instância cacheada de SmsSettings."""
    return _load_from_env()
