"""Controle das tasks de envio de SMS disparadas pelo webhook.

O envio roda destacado da resposta HTTP: a rota agenda e responde sem
esperar. As tasks ficam referenciadas até terminar (o event loop só guarda
referência fraca) e são drenadas no shutdown.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Coroutine

logger = logging.getLogger(__name__)

_active_tasks: set[asyncio.Task[Any]] = set()


def schedule_send_task(
    *,
    correlation_id: str,
    coroutine: Coroutine[Any, Any, Any],
) -> asyncio.Task[Any]:
    """Agenda o envio sem bloquear a resposta."""
    task = asyncio.create_task(coroutine)
    _active_tasks.add(task)
    task.add_done_callback(_on_send_task_done)
    logger.info(
        "sms_send_scheduled",
        extra={
            "channel": "chec",
            "correlation_id": correlation_id,
            "active_tasks": len(_active_tasks),
        },
    )
    return task


def active_task_count() -> int:
    """Quantidade de envios ainda em andamento."""
    return len(_active_tasks)


def _on_send_task_done(task: asyncio.Task[Any]) -> None:
    _active_tasks.discard(task)
    with contextlib.suppress(asyncio.CancelledError):
        exc = task.exception()
        if exc is not None:
            logger.error(
                "sms_send_task_failed",
                extra={
                    "channel": "chec",
                    "error_type": type(exc).__name__,
                    "active_tasks": len(_active_tasks),
                },
            )


async def drain_send_tasks(timeout_seconds: float = 30.0) -> None:
    """Aguarda envios pendentes durante o shutdown; cancela o que sobrar."""
    if not _active_tasks:
        return

    pending_now = list(_active_tasks)
    logger.info(
        "sms_send_shutdown_wait",
        extra={
            "channel": "chec",
            "pending_tasks": len(pending_now),
            "timeout_seconds": timeout_seconds,
        },
    )
    _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
    if not pending:
        return

    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)
    logger.warning(
        "sms_send_shutdown_cancelled",
        extra={"channel": "chec", "cancelled_tasks": len(pending)},
    )
