# -*- coding: utf-8 -*-
"""
app/main.py

Punto de entrada principal del storefront gateway.

- Carga .env (salvo en producción) antes de resolver settings
- Logging configurado desde settings (plain/pretty/json)
- Middlewares: JSON para excepciones no manejadas, log por request, CORS
- Rutas públicas (/health, /webhook) y protegidas (checkout)
- Shutdown ordenado: cierra engines de base de datos

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Cargar .env ANTES de resolver settings
# En DEV/TEST: las variables del entorno mandan sobre .env (override=False)
# En PROD: no se carga .env
# ---------------------------------------------------------------------------
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().strip('"').strip("'").lower()
if _PYTHON_ENV != "production":
    load_dotenv(dotenv_path=_ENV_PATH, override=False)

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.routes import router as api_router
from app.shared.config import BaseAppSettings, get_settings, setup_logging
from app.shared.database import dispose_engines
from app.shared.middleware import JSONExceptionMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings: BaseAppSettings = app.state.settings
    logger.info(
        "🟢 %s iniciado (env=%s, stripe=%s, webhook=%s, catálogo=%s)",
        settings.app_name,
        settings.python_env,
        "on" if settings.get_stripe_secret_key() else "off",
        "on" if settings.get_stripe_webhook_secret() else "off",
        "on" if settings.database_url else "off",
    )
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        await dispose_engines()
        logger.info("🔴 %s apagado.", settings.app_name)


def _configure_cors(app_instance: FastAPI, settings: BaseAppSettings) -> dict:
    """
    Configura CORS middleware.

    "*" con allow_credentials=True es inválido en navegadores, así que el
    modo wildcard desactiva credenciales.
    """
    origins = settings.get_cors_origins()
    is_wildcard = origins == ["*"]

    cors_config = {
        "allow_origins": origins,
        "allow_credentials": not is_wildcard,
        "allow_methods": ["GET", "POST", "OPTIONS"] if not is_wildcard else ["*"],
        "allow_headers": ["*"],
        "max_age": 600,
    }
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    logger.info("CORS configurado: origins=%s credentials=%s", origins, cors_config["allow_credentials"])
    return cors_config


def create_app(settings: BaseAppSettings | None = None) -> FastAPI:
    """Construye la aplicación FastAPI con sus middlewares y rutas."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app_instance = FastAPI(
        title=settings.app_name,
        description="Gate Bearer, webhooks Stripe y proxy de checkout para el storefront.",
        version=settings.app_version,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "health", "description": "Estado del servicio"},
            {"name": "webhooks", "description": "Webhooks firmados de Stripe"},
            {"name": "checkout", "description": "Payment intents y Checkout Sessions (requiere Bearer)"},
        ],
    )

    app_instance.state.settings = settings
    # Las rutas resuelven settings vía Depends(get_settings); se fija la instancia recibida
    app_instance.dependency_overrides[get_settings] = lambda: settings

    # Orden: el último agregado es el más externo
    app_instance.add_middleware(RequestLoggingMiddleware)
    app_instance.add_middleware(JSONExceptionMiddleware)
    _configure_cors(app_instance, settings)

    app_instance.include_router(api_router)
    return app_instance


app = create_app()


if __name__ == "__main__":
    _settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=_settings.app_host,
        port=_settings.app_port,
        reload=_settings.is_dev,
    )

# Fin del archivo app/main.py
