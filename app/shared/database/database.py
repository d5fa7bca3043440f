# -*- coding: utf-8 -*-
"""
app/shared/database/database.py

SQLAlchemy async para el catálogo de solo lectura del storefront.

El backing store es opcional: si no hay DB_URL configurada, el engine no se
crea y las dependencias entregan None (las rutas deciden cómo responder).

Provee:
- get_engine(settings): engine async cacheado por URL (o None)
- get_sessionmaker(settings): async_sessionmaker asociado (o None)
- Dependencia FastAPI: get_optional_session
- dispose_engines(): cierre ordenado en el shutdown (lifespan)
- check_database_health()
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncGenerator, Dict, Optional

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.shared.config import BaseAppSettings, get_settings

logger = logging.getLogger(__name__)

# Un engine por URL; se crean perezosamente y viven hasta el shutdown
_engines: Dict[str, AsyncEngine] = {}
_sessionmakers: Dict[str, async_sessionmaker[AsyncSession]] = {}


def _engine_kwargs(settings: BaseAppSettings, url: str) -> dict:
    kwargs: dict = {"echo": settings.db_echo_sql}
    # SQLite (tests/local) no acepta parámetros de pool
    if not url.startswith("sqlite"):
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=settings.db_pool_recycle,
            pool_pre_ping=True,
        )
    return kwargs


def get_engine(settings: BaseAppSettings) -> Optional[AsyncEngine]:
    """Devuelve el engine async para la URL configurada, o None si no hay DB."""
    url = settings.database_url
    if not url:
        return None
    engine = _engines.get(url)
    if engine is None:
        engine = create_async_engine(url, **_engine_kwargs(settings, url))
        _engines[url] = engine
        logger.info("[DB] Engine creado (driver=%s, echo=%s)", engine.url.drivername, settings.db_echo_sql)
    return engine


def get_sessionmaker(settings: BaseAppSettings) -> Optional[async_sessionmaker[AsyncSession]]:
    """Devuelve la fábrica de sesiones para la URL configurada, o None si no hay DB."""
    engine = get_engine(settings)
    if engine is None:
        return None
    url = settings.database_url
    factory = _sessionmakers.get(url)
    if factory is None:
        factory = async_sessionmaker(
            bind=engine,
            expire_on_commit=False,
            class_=AsyncSession,
            autoflush=False,
        )
        _sessionmakers[url] = factory
    return factory


# ── Dependencias FastAPI
async def get_optional_session(
    settings: BaseAppSettings = Depends(get_settings),
) -> AsyncGenerator[Optional[AsyncSession], None]:
    """
    Entrega una AsyncSession de solo lectura, o None si no hay base de datos.

    La sesión nunca hace commit: cualquier transacción abierta se revierte
    al terminar el request.
    """
    factory = get_sessionmaker(settings)
    if factory is None:
        yield None
        return

    async with factory() as session:
        try:
            yield session
        except SQLAlchemyError:
            await session.rollback()
            raise
        finally:
            if session.in_transaction():
                await session.rollback()


async def dispose_engines() -> None:
    """Cierra todos los engines creados (llamar en el shutdown)."""
    for engine in list(_engines.values()):
        await engine.dispose()
        logger.info("[DB] Engine cerrado (driver=%s)", engine.url.drivername)
    _engines.clear()
    _sessionmakers.clear()


# ── Health check
async def check_database_health(
    settings: BaseAppSettings,
    timeout_s: float = 2.0,
    sql: str = "SELECT 1",
) -> Optional[bool]:
    """
    Verifica conectividad a la base de datos.

    Returns:
        None si no hay base de datos configurada; True/False según conectividad.
    """
    engine = get_engine(settings)
    if engine is None:
        return None

    async def _ping() -> None:
        async with engine.connect() as conn:
            await conn.execute(text(sql))

    try:
        await asyncio.wait_for(_ping(), timeout=timeout_s)
        return True
    except (asyncio.TimeoutError, SQLAlchemyError, OSError) as e:
        logger.warning("[DB] Health check falló: %s", e)
        return False


__all__ = [
    "get_engine",
    "get_sessionmaker",
    "get_optional_session",
    "dispose_engines",
    "check_database_health",
]
# Fin del archivo app/shared/database/database.py
