# -*- coding: utf-8 -*-
"""
Módulo de webhooks Stripe: verificación de firma y despacho por tag.
"""

from .dispatcher import HANDLERS, dispatch_event, event_field
from .enums import StripeEventType
from .routes import router
from .signature_verification import (
    WebhookNotConfigured,
    WebhookVerificationError,
    verify_stripe_webhook_signature,
)

__all__ = [
    "StripeEventType",
    "HANDLERS",
    "dispatch_event",
    "event_field",
    "WebhookNotConfigured",
    "WebhookVerificationError",
    "verify_stripe_webhook_signature",
    "router",
]
