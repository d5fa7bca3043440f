# -*- coding: utf-8 -*-
"""
app/routes/health_routes.py

Endpoint básico de health check del gateway (público, sin Bearer).

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.shared.config import BaseAppSettings, get_settings
from app.shared.database import check_database_health

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check del gateway",
    description=(
        "Devuelve el estado básico del gateway. Si hay catálogo configurado, "
        "incluye una verificación simple de conectividad a la base de datos."
    ),
)
async def health_check(settings: BaseAppSettings = Depends(get_settings)) -> dict:
    """
    Health check básico.

    Returns:
        dict: información mínima de estado de la aplicación.
    """
    db_ok = await check_database_health(settings, timeout_s=2.0)

    return {
        # Sin base de datos configurada el gateway sigue operativo (catálogo opcional)
        "status": "degraded" if db_ok is False else "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "database": {
            "configured": settings.database_url is not None,
            "reachable": db_ok,
        },
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
    }

# Fin del archivo app/routes/health_routes.py
