# -*- coding: utf-8 -*-
"""
app/routes/__init__.py

Ensamblador principal de ruteadores del gateway.

Todas las rutas se montan sin prefijo (contrato con el storefront):
- Públicas: /health, /webhook
- Protegidas (gate Bearer): rutas de checkout
"""

from fastapi import APIRouter

from app.modules.checkout import router as checkout_router
from app.modules.webhooks import router as webhooks_router

from .health_routes import router as health_router

router = APIRouter()

router.include_router(health_router)
router.include_router(webhooks_router)
router.include_router(checkout_router)

__all__ = ["router"]
