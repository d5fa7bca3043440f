# -*- coding: utf-8 -*-
"""
app/shared/database/__init__.py

Capa de acceso a datos (SQLAlchemy async) del gateway.
"""

from .base import Base, NAMING_CONVENTION
from .database import (
    get_engine,
    get_sessionmaker,
    get_optional_session,
    dispose_engines,
    check_database_health,
)

__all__ = [
    "Base",
    "NAMING_CONVENTION",
    "get_engine",
    "get_sessionmaker",
    "get_optional_session",
    "dispose_engines",
    "check_database_health",
]
