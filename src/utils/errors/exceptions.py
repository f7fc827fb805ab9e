"""Exceções de domínio para falhas de infraestrutura externa."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura externa."""


class SmsSendError(InfrastructureError):
    """Falha ao enviar SMS pelo provedor.

    Nunca carrega número de telefone nem corpo da mensagem.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
