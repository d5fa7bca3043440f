# -*- coding: utf-8 -*-
"""
Módulo de checkout: payment intents y Checkout Sessions de Stripe.
"""

from .line_items import build_line_items, to_minor_units
from .routes import router
from .stripe_gateway import StripeGateway, StripeNotConfigured, get_stripe_gateway

__all__ = [
    "router",
    "StripeGateway",
    "StripeNotConfigured",
    "get_stripe_gateway",
    "build_line_items",
    "to_minor_units",
]
