# -*- coding: utf-8 -*-
"""
app/modules/checkout/schemas.py

Esquemas Pydantic para las rutas de checkout (proxy hacia Stripe).

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class PaymentIntentRequest(BaseModel):
    """Request para crear un PaymentIntent."""

    amount: int = Field(
        gt=0,
        description="Monto en la unidad mínima de la moneda (centavos).",
    )


class CheckoutItem(BaseModel):
    """
    Línea de un checkout.

    Dos formas válidas:
    - product_id: el nombre y precio se resuelven desde el catálogo.
    - name + unit_amount: línea ad-hoc sin catálogo.
    """

    product_id: Optional[str] = Field(default=None, min_length=1, max_length=64)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    unit_amount: Optional[int] = Field(
        default=None,
        gt=0,
        description="Precio unitario en centavos (solo para líneas sin product_id).",
    )
    quantity: int = Field(default=1, ge=1, le=999)

    @model_validator(mode="after")
    def _require_product_or_price(self) -> "CheckoutItem":
        if self.product_id is None and (self.name is None or self.unit_amount is None):
            raise ValueError("Each item needs product_id, or both name and unit_amount")
        return self


class CheckoutSessionRequest(BaseModel):
    """Request para crear una Checkout Session."""

    items: List[CheckoutItem] = Field(min_length=1)


class CheckoutSessionResponse(BaseModel):
    """URL de Stripe a la que el storefront redirige al cliente."""

    url: Optional[str] = None


class ExpireCheckoutSessionRequest(BaseModel):
    session_id: str = Field(min_length=1)


__all__ = [
    "PaymentIntentRequest",
    "CheckoutItem",
    "CheckoutSessionRequest",
    "CheckoutSessionResponse",
    "ExpireCheckoutSessionRequest",
]
