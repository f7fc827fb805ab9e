"""Exceções utilitárias compartilhadas."""

from .exceptions import InfrastructureError, SmsSendError

__all__ = [
    "InfrastructureError",
    "SmsSendError",
]
