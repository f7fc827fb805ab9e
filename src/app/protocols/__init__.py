"""Protocolos e contratos do core da aplicação."""

from .sms_sender import SmsSenderProtocol

__all__ = [
    "SmsSenderProtocol",
]
