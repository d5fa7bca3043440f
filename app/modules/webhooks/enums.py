# -*- coding: utf-8 -*-
"""
app/modules/webhooks/enums.py

Tipos de evento de Stripe que el gateway reconoce.

El conjunto es cerrado: cualquier tag fuera de la lista se resuelve a
UNRECOGNIZED, que se registra en log y se acusa igual que los demás.

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class StripeEventType(str, Enum):
    """Tags de evento Stripe manejados por el dispatcher."""

    ACCOUNT_UPDATED = "account.updated"
    ACCOUNT_EXTERNAL_ACCOUNT_CREATED = "account.external_account.created"
    ACCOUNT_EXTERNAL_ACCOUNT_DELETED = "account.external_account.deleted"
    ACCOUNT_EXTERNAL_ACCOUNT_UPDATED = "account.external_account.updated"
    CHECKOUT_SESSION_ASYNC_PAYMENT_FAILED = "checkout.session.async_payment_failed"
    CHECKOUT_SESSION_ASYNC_PAYMENT_SUCCEEDED = "checkout.session.async_payment_succeeded"
    CHECKOUT_SESSION_COMPLETED = "checkout.session.completed"
    CHECKOUT_SESSION_EXPIRED = "checkout.session.expired"

    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "StripeEventType":
        """
        Resuelve un tag por coincidencia exacta (sensible a mayúsculas).

        El valor sentinel "unrecognized" no es un tag de Stripe, así que
        nunca se resuelve desde el payload.
        """
        if not tag or tag == cls.UNRECOGNIZED.value:
            return cls.UNRECOGNIZED
        try:
            return cls(tag)
        except ValueError:
            return cls.UNRECOGNIZED

    @classmethod
    def known(cls) -> "list[StripeEventType]":
        return [t for t in cls if t is not cls.UNRECOGNIZED]


__all__ = ["StripeEventType"]
