# -*- coding: utf-8 -*-
"""
app/shared/config/settings_base.py

Base de configuración (Pydantic v2) para el gateway de pagos del storefront.
- Esta clase NO instancia singletons ni resuelve .env; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.
- Las instancias son inmutables (frozen): los secretos se cargan una vez al
  arranque y se inyectan en los componentes vía Depends(get_settings).

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from pydantic import AliasChoices, Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]

_DEFAULT_ACCESS_SECRET = "please-change-me"


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="Storefront Gateway", validation_alias="APP_NAME")
    app_version: str = Field(default="0.1.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=3000, validation_alias=AliasChoices("APP_PORT", "PORT"))
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # =========================
    # CORS / Frontend
    # =========================
    allowed_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")
    client_url: str = Field(default="http://localhost:5173", validation_alias="CLIENT_URL")

    # =========================
    # Auth / JWT (gate Bearer)
    # =========================
    access_token_secret: SecretStr = Field(
        default=SecretStr(_DEFAULT_ACCESS_SECRET),
        validation_alias=AliasChoices("ACCESS_TOKEN_SECRET", "JWT_SECRET_KEY"),
    )
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(default=60, validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # =========================
    # Stripe
    # =========================
    stripe_secret_key: Optional[SecretStr] = Field(default=None, validation_alias="STRIPE_SECRET_KEY")
    stripe_webhook_secret: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("STRIPE_WEBHOOK_SECRET", "STRIPE_TEST_SECRET"),
    )
    stripe_webhook_tolerance_seconds: int = Field(default=300, validation_alias="STRIPE_WEBHOOK_TOLERANCE_SECONDS")
    default_currency: str = Field(default="usd", validation_alias="DEFAULT_CURRENCY")

    # =========================
    # Base de datos (catálogo de solo lectura, opcional)
    # =========================
    db_url: Optional[str] = Field(default=None, validation_alias=AliasChoices("DB_URL", "DATABASE_URL"))
    db_echo_sql: bool = Field(default=False, validation_alias="DB_ECHO_SQL")
    db_pool_size: int = Field(default=5, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=5, validation_alias="DB_MAX_OVERFLOW")
    db_pool_recycle: int = Field(default=1800, validation_alias="DB_POOL_RECYCLE")

    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> Optional[str]:
        """
        URL de conexión para SQLAlchemy async.
        Normaliza esquemas postgres:// y postgresql:// a postgresql+asyncpg://.
        Devuelve None si no hay base de datos configurada.
        """
        if not self.db_url:
            return None
        url = self.db_url.strip()
        if url.startswith("postgres://"):
            return "postgresql+asyncpg://" + url[len("postgres://"):]
        if url.startswith("postgresql://"):
            return "postgresql+asyncpg://" + url[len("postgresql://"):]
        return url

    # =========================
    # Observabilidad / Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "pretty", "plain"] = Field(default="pretty", validation_alias="LOG_FORMAT")

    # ===== Helpers de entorno =====
    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @computed_field  # type: ignore[misc]
    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @computed_field  # type: ignore[misc]
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    # ===== Accesores de secretos =====
    def get_access_token_secret(self) -> str:
        return self.access_token_secret.get_secret_value()

    def get_stripe_secret_key(self) -> Optional[str]:
        if self.stripe_secret_key is None:
            return None
        return self.stripe_secret_key.get_secret_value() or None

    def get_stripe_webhook_secret(self) -> Optional[str]:
        if self.stripe_webhook_secret is None:
            return None
        return self.stripe_webhook_secret.get_secret_value() or None

    # ===== Utilidad para normalizar CORS =====
    def get_cors_origins(self) -> list[str]:
        """Convierte allowed_origins en lista procesable para CORS middleware."""
        if not self.allowed_origins or self.allowed_origins == "*":
            return ["*"]
        return [o.strip().strip('"').strip("'") for o in self.allowed_origins.split(",") if o.strip()]

    def _security_checks(self) -> None:
        """
        Validaciones mínimas de seguridad y coherencia.
        Se invoca desde config_loader tras instanciar el settings.
        """
        access_secret = self.get_access_token_secret()
        webhook_secret = self.get_stripe_webhook_secret()

        # El secreto de credenciales y el de webhooks nunca se comparten
        if webhook_secret and access_secret == webhook_secret:
            raise ValueError("ACCESS_TOKEN_SECRET y STRIPE_WEBHOOK_SECRET deben ser distintos.")

        if self.is_prod:
            if access_secret == _DEFAULT_ACCESS_SECRET or len(access_secret) < 32:
                raise ValueError("ACCESS_TOKEN_SECRET debe tener ≥32 caracteres en producción")
            if not webhook_secret:
                raise ValueError("STRIPE_WEBHOOK_SECRET es requerido en producción")
            stripe_key = self.get_stripe_secret_key()
            if not stripe_key:
                raise ValueError("STRIPE_SECRET_KEY es requerido en producción")
            if stripe_key.startswith("sk_test_"):
                raise ValueError("En producción, STRIPE_SECRET_KEY debe ser una clave live.")

        if self.is_dev:
            if access_secret == _DEFAULT_ACCESS_SECRET or len(access_secret) < 32:
                logger.info("ACCESS_TOKEN_SECRET es débil o usa valor por defecto - usa una clave más segura")
            if not webhook_secret:
                logger.info("STRIPE_WEBHOOK_SECRET vacío - /webhook responderá 500 hasta configurarlo")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )


__all__ = ["BaseAppSettings", "EnvName"]
# Fin del archivo app/shared/config/settings_base.py
