"""Cliente HTTP especializado para a API de mensagens da Twilio.

Estende HttpClient genérico com:
- Autenticação basic (Account SID + Auth Token)
- Corpo form-encoded (Body, To, From)
- Tradução de erros Twilio para SmsSendError
- Logging estruturado sem telefones nem corpo da mensagem
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.http import HttpClient, HttpClientConfig, HttpError
from utils.errors import SmsSendError

from .twilio_errors import parse_twilio_error

if TYPE_CHECKING:
    import httpx

    from config.settings import SmsSettings

logger: logging.Logger = logging.getLogger(__name__)


class TwilioSmsClient(HttpClient):
    """Envia SMS pela Twilio Messages API."""

    def __init__(
        self,
        settings: SmsSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            config or HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
            transport=transport,
        )
        self._settings = settings

    async def send_message(self, body: str, to: str, from_: str) -> str:
        """Cria a mensagem na Twilio.

        Args:
            body: Texto do SMS
            to: Número de destino (E.164)
            from_: Número registrado na Twilio

        Returns:
            SID da mensagem criada

        Raises:
            SmsSendError: Credenciais ou números ausentes, erro HTTP,
                erro Twilio ou resposta sem SID
        """
        if not self._settings.account_sid or not self._settings.auth_token:
            raise SmsSendError("sms_credentials_missing")
        if not to or not from_:
            raise SmsSendError("sms_numbers_missing")

        try:
            response = await self.post_form(
                self._settings.messages_endpoint,
                data={"Body": body, "To": to, "From": from_},
                auth=(self._settings.account_sid, self._settings.auth_token),
                headers={"Accept": "application/json"},
            )
        except HttpError as exc:
            raise SmsSendError(str(exc)) from exc

        if response.status_code >= 400:
            api_error = parse_twilio_error(response.status_code, _safe_json(response))
            logger.warning(
                "twilio_api_error",
                extra={
                    "status_code": api_error.status_code,
                    "error_code": api_error.error_code,
                    "more_info": api_error.more_info,
                    "is_permanent": api_error.is_permanent,
                },
            )
            raise SmsSendError(
                "sms_provider_error",
                status_code=api_error.status_code,
                error_code=api_error.error_code,
            )

        message_sid = _safe_json(response).get("sid")
        if not isinstance(message_sid, str) or not message_sid:
            raise SmsSendError("sms_invalid_response", status_code=response.status_code)

        logger.debug("twilio_message_created", extra={"status_code": response.status_code})
        return message_sid


def _safe_json(response: httpx.Response) -> dict:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
