"""Conector Twilio — envio de SMS via REST API.

Único ponto de IO de saída do serviço.
"""

from .http_client import TwilioSmsClient
from .twilio_errors import TwilioApiError, is_permanent_error, parse_twilio_error

__all__ = [
    "TwilioApiError",
    "TwilioSmsClient",
    "is_permanent_error",
    "parse_twilio_error",
]
