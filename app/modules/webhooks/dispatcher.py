# -*- coding: utf-8 -*-
"""
app/modules/webhooks/dispatcher.py

Despacho de eventos Stripe verificados por tag.

Cada tag conocido tiene un handler registrado. Por ahora todos son
placeholders que solo acusan recibo: el gateway no mantiene estado de
pagos (vive en Stripe) y el consumidor de estos eventos aún no existe.
Los tags desconocidos se registran en log y no hacen nada más.

Repetir una entrega es inocuo porque ningún handler tiene efectos.

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict

from .enums import StripeEventType

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], Awaitable[None]]


def event_field(obj: Any, name: str) -> Any:
    """Lee un campo de un stripe.Event/StripeObject o de un dict plano."""
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


async def _acknowledge(event: Any) -> None:
    obj = event_field(event_field(event, "data"), "object")
    logger.debug(
        "Stripe event acknowledged: type=%s id=%s object=%s",
        event_field(event, "type"), event_field(event, "id"), event_field(obj, "id"),
    )


HANDLERS: Dict[StripeEventType, EventHandler] = {
    StripeEventType.ACCOUNT_UPDATED: _acknowledge,
    StripeEventType.ACCOUNT_EXTERNAL_ACCOUNT_CREATED: _acknowledge,
    StripeEventType.ACCOUNT_EXTERNAL_ACCOUNT_DELETED: _acknowledge,
    StripeEventType.ACCOUNT_EXTERNAL_ACCOUNT_UPDATED: _acknowledge,
    StripeEventType.CHECKOUT_SESSION_ASYNC_PAYMENT_FAILED: _acknowledge,
    StripeEventType.CHECKOUT_SESSION_ASYNC_PAYMENT_SUCCEEDED: _acknowledge,
    StripeEventType.CHECKOUT_SESSION_COMPLETED: _acknowledge,
    StripeEventType.CHECKOUT_SESSION_EXPIRED: _acknowledge,
}


async def dispatch_event(event: Any) -> StripeEventType:
    """
    Ejecuta el handler del tag del evento y devuelve el tipo resuelto.

    Args:
        event: Evento verificado (stripe.Event o dict con la misma forma)

    Returns:
        StripeEventType resuelto (UNRECOGNIZED si el tag no es conocido)
    """
    tag = event_field(event, "type")
    event_type = StripeEventType.from_tag(tag)

    handler = HANDLERS.get(event_type)
    if handler is None:
        logger.info("Unhandled event type %s", tag)
        return StripeEventType.UNRECOGNIZED

    await handler(event)
    return event_type


__all__ = ["EventHandler", "HANDLERS", "dispatch_event", "event_field"]
