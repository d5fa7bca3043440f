# tests/modules/webhooks/test_signature_verification.py
# -*- coding: utf-8 -*-
import json
import time

import pytest

from app.modules.webhooks import (
    WebhookNotConfigured,
    WebhookVerificationError,
    verify_stripe_webhook_signature,
)

SECRET = "whsec_unit_secret"


def _payload(tag="checkout.session.completed"):
    return json.dumps({"id": "evt_sig", "object": "event", "type": tag, "data": {"object": {}}}).encode()


def test_valid_signature_builds_event(stripe_signature):
    body = _payload()
    event = verify_stripe_webhook_signature(body, stripe_signature(body, SECRET), SECRET)
    assert event["type"] == "checkout.session.completed"
    assert event["id"] == "evt_sig"


def test_missing_header_is_rejected():
    with pytest.raises(WebhookVerificationError):
        verify_stripe_webhook_signature(_payload(), None, SECRET)


def test_missing_secret_is_configuration_error(stripe_signature):
    body = _payload()
    with pytest.raises(WebhookNotConfigured):
        verify_stripe_webhook_signature(body, stripe_signature(body, SECRET), None)


def test_signature_with_other_secret_is_rejected(stripe_signature):
    body = _payload()
    with pytest.raises(WebhookVerificationError):
        verify_stripe_webhook_signature(body, stripe_signature(body, "whsec_other"), SECRET)


def test_tampered_payload_is_rejected(stripe_signature):
    body = _payload()
    header = stripe_signature(body, SECRET)
    with pytest.raises(WebhookVerificationError):
        verify_stripe_webhook_signature(_payload("account.updated"), header, SECRET)


def test_stale_timestamp_is_rejected(stripe_signature):
    body = _payload()
    header = stripe_signature(body, SECRET, timestamp=int(time.time()) - 3600)
    with pytest.raises(WebhookVerificationError):
        verify_stripe_webhook_signature(body, header, SECRET, tolerance=300)


def test_unparseable_payload_is_rejected(stripe_signature):
    body = b"{not json"
    with pytest.raises(WebhookVerificationError):
        verify_stripe_webhook_signature(body, stripe_signature(body, SECRET), SECRET)


def test_garbage_header_is_rejected():
    with pytest.raises(WebhookVerificationError):
        verify_stripe_webhook_signature(_payload(), "t=0,v1=badsig", SECRET)
