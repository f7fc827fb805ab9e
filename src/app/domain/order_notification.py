"""Notificação de novo pedido — texto curto enviado por SMS.

Extrai o id e o total formatado do webhook de pedido da Chec.
Webhooks de teste do painel não trazem `payload.id` nem `payload.order`;
nesses casos entram os placeholders.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

TEST_ORDER_ID = "Test request"
EMPTY_ORDER_VALUE = "$0.00"


class OutboundMessage(BaseModel):
    """Mensagem pronta para o provedor de SMS."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    body: str = Field(..., min_length=1)
    to: str
    from_: str = Field(..., alias="from")


def _as_mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def extract_order_id(webhook: dict[str, Any]) -> str:
    """`payload.id` ou o placeholder de requisição de teste."""
    order_id = _as_mapping(webhook.get("payload")).get("id")
    return str(order_id) if order_id else TEST_ORDER_ID


def extract_order_value(webhook: dict[str, Any]) -> str:
    """`payload.order.total_with_tax.formatted_with_symbol` ou `$0.00`."""
    order = _as_mapping(webhook.get("payload")).get("order")
    if not order:
        return EMPTY_ORDER_VALUE
    total = _as_mapping(_as_mapping(order).get("total_with_tax"))
    formatted = total.get("formatted_with_symbol")
    return str(formatted) if formatted else EMPTY_ORDER_VALUE


def format_order_notification(webhook: dict[str, Any]) -> str:
    """Monta `New order: <id> for <valor>`."""
    return f"New order: {extract_order_id(webhook)} for {extract_order_value(webhook)}"
