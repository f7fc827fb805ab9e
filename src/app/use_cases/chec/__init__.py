"""Use cases de webhooks Chec."""

from .notify_order import NotifyOrderUseCase, SmsSendOutcome

__all__ = [
    "NotifyOrderUseCase",
    "SmsSendOutcome",
]
