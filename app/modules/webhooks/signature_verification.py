# -*- coding: utf-8 -*-
"""
app/modules/webhooks/signature_verification.py

Verificación de firma de webhooks Stripe.

Stripe firma cada entrega con HMAC-SHA256 sobre "{timestamp}.{payload}"
usando el secreto del endpoint, y envía el resultado en el header
Stripe-Signature con formato "t=<ts>,v1=<firma>[,v1=...]". La verificación
la hace el SDK oficial (stripe.Webhook.construct_event), que además
rechaza timestamps fuera de la tolerancia.

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
from typing import Optional

import stripe

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_SECONDS = 300


class WebhookNotConfigured(RuntimeError):
    """No hay STRIPE_WEBHOOK_SECRET configurado en el proceso."""


class WebhookVerificationError(ValueError):
    """La entrega no pasó la verificación (header, firma, timestamp o payload)."""


def verify_stripe_webhook_signature(
    payload: bytes,
    sig_header: Optional[str],
    secret: Optional[str],
    tolerance: int = DEFAULT_TOLERANCE_SECONDS,
) -> stripe.Event:
    """
    Verifica la firma de un webhook de Stripe y construye el evento.

    Args:
        payload: Body raw del request (bytes sin parsear)
        sig_header: Header Stripe-Signature
        secret: Secret del webhook (inyectado desde settings)
        tolerance: Ventana máxima en segundos para el timestamp firmado

    Returns:
        stripe.Event verificado

    Raises:
        WebhookNotConfigured: Si no hay secret configurado
        WebhookVerificationError: Si falta el header, la firma no coincide,
            el timestamp está fuera de tolerancia o el payload no es JSON
    """
    if not sig_header:
        raise WebhookVerificationError("Missing Stripe-Signature header")

    if not secret:
        raise WebhookNotConfigured("STRIPE_WEBHOOK_SECRET not configured")

    try:
        return stripe.Webhook.construct_event(payload, sig_header, secret, tolerance=tolerance)
    except stripe.SignatureVerificationError as e:
        raise WebhookVerificationError(e.user_message or str(e) or "Invalid signature") from e
    except ValueError as e:
        # construct_event lanza ValueError cuando el payload no es JSON válido
        raise WebhookVerificationError(f"Invalid payload: {e}") from e


__all__ = [
    "DEFAULT_TOLERANCE_SECONDS",
    "WebhookNotConfigured",
    "WebhookVerificationError",
    "verify_stripe_webhook_signature",
]
