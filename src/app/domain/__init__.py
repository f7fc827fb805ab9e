"""Modelos de domínio do notificador."""

from .order_notification import (
    EMPTY_ORDER_VALUE,
    TEST_ORDER_ID,
    OutboundMessage,
    extract_order_id,
    extract_order_value,
    format_order_notification,
)

__all__ = [
    "EMPTY_ORDER_VALUE",
    "TEST_ORDER_ID",
    "OutboundMessage",
    "extract_order_id",
    "extract_order_value",
    "format_order_notification",
]
