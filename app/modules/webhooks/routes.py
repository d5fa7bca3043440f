# -*- coding: utf-8 -*-
"""
app/modules/webhooks/routes.py

Endpoint receptor de webhooks Stripe.

Endpoint:
- POST /webhook  (público; autenticado por firma, no por Bearer)

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from app.shared.config import BaseAppSettings, get_settings

from .dispatcher import dispatch_event, event_field
from .signature_verification import (
    WebhookNotConfigured,
    WebhookVerificationError,
    verify_stripe_webhook_signature,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhooks"])


@router.post(
    "/webhook",
    status_code=status.HTTP_200_OK,
    response_class=Response,
)
async def stripe_webhook(
    request: Request,
    settings: BaseAppSettings = Depends(get_settings),
) -> Response:
    """
    Webhook de Stripe.

    Requiere header Stripe-Signature. Si la firma verifica, el evento se
    despacha por tag y siempre se responde 200 con body vacío.
    """
    raw_body = await request.body()
    sig_header = request.headers.get("Stripe-Signature")

    try:
        event = verify_stripe_webhook_signature(
            raw_body,
            sig_header,
            settings.get_stripe_webhook_secret(),
            tolerance=settings.stripe_webhook_tolerance_seconds,
        )
    except WebhookNotConfigured as e:
        logger.error("Webhook configuration error: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Webhook not configured",
        )
    except WebhookVerificationError as e:
        logger.warning("Webhook rejected: %s", e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Webhook Error: {e}",
        )

    logger.info("Stripe webhook received: type=%s id=%s", event_field(event, "type"), event_field(event, "id"))

    await dispatch_event(event)
    return Response(status_code=status.HTTP_200_OK)


__all__ = ["router"]
