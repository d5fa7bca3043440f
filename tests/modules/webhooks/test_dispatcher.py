# tests/modules/webhooks/test_dispatcher.py
# -*- coding: utf-8 -*-
"""
Suite: despacho de eventos por tag
Propósito:
  - Cada tag conocido ejecuta exactamente su handler
  - Tags desconocidos → UNRECOGNIZED + log "Unhandled event type <tag>"
  - Redespachar el mismo evento da el mismo resultado
"""

import logging

import pytest

from app.modules.webhooks import HANDLERS, StripeEventType, dispatch_event
from app.modules.webhooks import dispatcher as dispatcher_module


def _event(tag, event_id="evt_1"):
    return {"id": event_id, "type": tag, "data": {"object": {"id": "obj_1"}}}


def test_every_known_type_has_a_handler():
    assert set(HANDLERS) == set(StripeEventType.known())


@pytest.mark.anyio
@pytest.mark.parametrize("event_type", StripeEventType.known())
async def test_known_tag_runs_its_handler(monkeypatch, event_type):
    seen = []

    async def _spy(event):
        seen.append(event["type"])

    monkeypatch.setitem(dispatcher_module.HANDLERS, event_type, _spy)
    result = await dispatch_event(_event(event_type.value))
    assert result is event_type
    assert seen == [event_type.value]


@pytest.mark.anyio
async def test_unknown_tag_is_logged_and_acknowledged(caplog):
    with caplog.at_level(logging.INFO, logger="app.modules.webhooks.dispatcher"):
        result = await dispatch_event(_event("unknown.tag"))
    assert result is StripeEventType.UNRECOGNIZED
    assert "Unhandled event type unknown.tag" in caplog.text


@pytest.mark.anyio
async def test_redelivery_is_harmless():
    event = _event("checkout.session.completed", "evt_dup")
    first = await dispatch_event(event)
    second = await dispatch_event(event)
    assert first is second is StripeEventType.CHECKOUT_SESSION_COMPLETED


@pytest.mark.anyio
async def test_dispatch_accepts_attribute_style_events():
    class _Obj:
        id = "evt_attr"
        type = "account.updated"
        data = None

    assert await dispatch_event(_Obj()) is StripeEventType.ACCOUNT_UPDATED
