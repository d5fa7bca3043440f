# -*- coding: utf-8 -*-
"""
app/modules/checkout/routes.py

Rutas de checkout del storefront (proxy delgado hacia Stripe).

Endpoints (todos protegidos por el gate Bearer):
- POST /create-payment-intent
- POST /create-checkout-session
- GET  /get-checkout-session?session_id=...
- GET  /get-checkout-session-line-items?session_id=...
- POST /expire-checkout-session

Los errores de Stripe se devuelven como {"error": "<mensaje>"}:
400 para payment intents y 500 para las operaciones de Checkout Session.

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import stripe
from fastapi import APIRouter, Depends, Query, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth import require_identity
from app.modules.catalog import CatalogUnavailable, ProductNotFound
from app.shared.config import BaseAppSettings, get_settings
from app.shared.database import get_optional_session

from .line_items import build_line_items
from .schemas import (
    CheckoutSessionRequest,
    CheckoutSessionResponse,
    ExpireCheckoutSessionRequest,
    PaymentIntentRequest,
)
from .stripe_gateway import StripeGateway, StripeNotConfigured, get_stripe_gateway

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["checkout"],
    dependencies=[Depends(require_identity)],
)

# Errores que se reportan al cliente como {"error": ...}
_GATEWAY_ERRORS = (stripe.StripeError, StripeNotConfigured)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _gateway_error_message(exc: Exception) -> str:
    if isinstance(exc, stripe.StripeError):
        return exc.user_message or str(exc) or "Stripe error"
    return str(exc)


def to_jsonable(obj: Any) -> Any:
    """Serializa un StripeObject (o un dict plano) a tipos JSON nativos."""
    if isinstance(obj, stripe.StripeObject):
        return json.loads(str(obj))
    return jsonable_encoder(obj)


@router.post("/create-payment-intent", response_class=PlainTextResponse)
async def create_payment_intent(
    payload: PaymentIntentRequest,
    settings: BaseAppSettings = Depends(get_settings),
    gateway: StripeGateway = Depends(get_stripe_gateway),
):
    """Crea un PaymentIntent y responde con su client_secret en texto plano."""
    try:
        intent = await gateway.create_payment_intent(
            amount=payload.amount,
            currency=settings.default_currency.lower(),
        )
    except _GATEWAY_ERRORS as e:
        logger.exception("Stripe payment intent failed: %s", e)
        return _error(status.HTTP_400_BAD_REQUEST, _gateway_error_message(e))

    return PlainTextResponse(intent["client_secret"] or "")


@router.post("/create-checkout-session", response_model=CheckoutSessionResponse)
async def create_checkout_session(
    payload: CheckoutSessionRequest,
    settings: BaseAppSettings = Depends(get_settings),
    gateway: StripeGateway = Depends(get_stripe_gateway),
    session: Optional[AsyncSession] = Depends(get_optional_session),
):
    """
    Crea una Checkout Session para los items recibidos.

    Items con product_id se valoran desde el catálogo; el resto usa el
    nombre y unit_amount (centavos) enviados por el cliente.
    """
    try:
        line_items = await build_line_items(payload.items, session, settings.default_currency)
    except ProductNotFound as e:
        logger.info("Checkout rejected: %s", e)
        return _error(status.HTTP_404_NOT_FOUND, str(e))
    except CatalogUnavailable as e:
        logger.warning("Checkout rejected: %s", e)
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, str(e))

    client_url = settings.client_url.rstrip("/")
    try:
        checkout_session = await gateway.create_checkout_session(
            line_items=line_items,
            success_url=f"{client_url}/success",
            cancel_url=f"{client_url}/cancel",
        )
    except _GATEWAY_ERRORS as e:
        logger.exception("Stripe checkout session creation failed: %s", e)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, _gateway_error_message(e))

    return CheckoutSessionResponse(url=checkout_session["url"])


@router.get("/get-checkout-session")
async def get_checkout_session(
    session_id: str = Query(..., min_length=1),
    gateway: StripeGateway = Depends(get_stripe_gateway),
):
    try:
        checkout_session = await gateway.retrieve_checkout_session(session_id)
    except _GATEWAY_ERRORS as e:
        logger.exception("Stripe checkout session retrieval failed: session_id=%s", session_id)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, _gateway_error_message(e))

    return JSONResponse(content=to_jsonable(checkout_session))


@router.get("/get-checkout-session-line-items")
async def get_checkout_session_line_items(
    session_id: str = Query(..., min_length=1),
    gateway: StripeGateway = Depends(get_stripe_gateway),
):
    try:
        line_items = await gateway.list_checkout_line_items(session_id)
    except _GATEWAY_ERRORS as e:
        logger.exception("Stripe line items retrieval failed: session_id=%s", session_id)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, _gateway_error_message(e))

    return JSONResponse(content=to_jsonable(line_items))


@router.post("/expire-checkout-session")
async def expire_checkout_session(
    payload: ExpireCheckoutSessionRequest,
    gateway: StripeGateway = Depends(get_stripe_gateway),
):
    """Expira una Checkout Session abierta; Stripe rechaza las ya completadas."""
    try:
        checkout_session = await gateway.expire_checkout_session(payload.session_id)
    except _GATEWAY_ERRORS as e:
        logger.exception("Stripe checkout session expiration failed: session_id=%s", payload.session_id)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, _gateway_error_message(e))

    return JSONResponse(content=to_jsonable(checkout_session))


__all__ = ["router", "to_jsonable"]
