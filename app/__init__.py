# -*- coding: utf-8 -*-
"""
app/__init__.py

Paquete principal del storefront gateway.

Subpaquetes:
- app.modules: auth (gate Bearer), webhooks (Stripe), checkout, catalog
- app.shared: configuración, base de datos y middlewares
- app.routes: ensamblado de routers
"""
