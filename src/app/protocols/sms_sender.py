"""Protocolo de envio de SMS.

Evita dependência direta do app na camada api.
"""

from __future__ import annotations

from typing import Protocol


class SmsSenderProtocol(Protocol):
    """Contrato mínimo para um provedor de SMS."""

    async def send_message(self, body: str, to: str, from_: str) -> str:
        """Envia a mensagem e retorna o id atribuído pelo provedor."""
        ...
