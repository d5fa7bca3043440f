# -*- coding: utf-8 -*-
"""
app/modules/checkout/stripe_gateway.py

Cliente delgado sobre el SDK de Stripe para las rutas de checkout.

Cada llamada del SDK es bloqueante (requests), así que se ejecuta en el
threadpool para no bloquear el event loop. La API key viaja por llamada
(api_key=...) en lugar de mutar stripe.api_key global.

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import stripe
from fastapi import Depends
from fastapi.concurrency import run_in_threadpool

from app.shared.config import BaseAppSettings, get_settings

logger = logging.getLogger(__name__)


class StripeNotConfigured(RuntimeError):
    """Se lanza cuando se intenta llamar a Stripe sin STRIPE_SECRET_KEY."""

    def __init__(self) -> None:
        super().__init__("Stripe is not configured. Set STRIPE_SECRET_KEY.")


class StripeGateway:
    """
    Operaciones de checkout contra la API de Stripe.

    Todas las operaciones son pass-through: el estado de pagos y sesiones
    vive en Stripe, el gateway no persiste nada.
    """

    def __init__(self, secret_key: Optional[str]):
        self._secret_key = secret_key

    @property
    def is_configured(self) -> bool:
        return bool(self._secret_key)

    async def _call(self, fn, *args: Any, **params: Any) -> Any:
        if not self.is_configured:
            raise StripeNotConfigured()
        return await run_in_threadpool(fn, *args, api_key=self._secret_key, **params)

    async def create_payment_intent(self, *, amount: int, currency: str) -> stripe.PaymentIntent:
        logger.info("Creating Stripe payment intent: amount=%s currency=%s", amount, currency)
        intent = await self._call(stripe.PaymentIntent.create, amount=amount, currency=currency)
        logger.info("Stripe payment intent created: id=%s", intent["id"])
        return intent

    async def create_checkout_session(
        self,
        *,
        line_items: List[Dict[str, Any]],
        success_url: str,
        cancel_url: str,
    ) -> stripe.checkout.Session:
        """
        Crea una Checkout Session en modo pago único con tarjeta.

        Args:
            line_items: line_items ya construidos (ver line_items.build_line_items)
            success_url: URL de redirección en éxito
            cancel_url: URL de redirección en cancelación

        Raises:
            stripe.StripeError: Si Stripe rechaza la operación
            StripeNotConfigured: Si no hay STRIPE_SECRET_KEY
        """
        logger.info("Creating Stripe checkout session: line_items=%d", len(line_items))
        session = await self._call(
            stripe.checkout.Session.create,
            payment_method_types=["card"],
            mode="payment",
            line_items=line_items,
            success_url=success_url,
            cancel_url=cancel_url,
        )
        logger.info("Stripe checkout session created: session_id=%s", session["id"])
        return session

    async def retrieve_checkout_session(self, session_id: str) -> stripe.checkout.Session:
        logger.debug("Retrieving Stripe checkout session: session_id=%s", session_id)
        return await self._call(stripe.checkout.Session.retrieve, session_id)

    async def list_checkout_line_items(self, session_id: str) -> Any:
        logger.debug("Listing Stripe checkout line items: session_id=%s", session_id)
        return await self._call(stripe.checkout.Session.list_line_items, session_id)

    async def expire_checkout_session(self, session_id: str) -> stripe.checkout.Session:
        logger.info("Expiring Stripe checkout session: session_id=%s", session_id)
        return await self._call(stripe.checkout.Session.expire, session_id)


def get_stripe_gateway(settings: BaseAppSettings = Depends(get_settings)) -> StripeGateway:
    """Dependencia FastAPI: gateway configurado con la secret key del entorno."""
    return StripeGateway(secret_key=settings.get_stripe_secret_key())


__all__ = ["StripeGateway", "StripeNotConfigured", "get_stripe_gateway"]
