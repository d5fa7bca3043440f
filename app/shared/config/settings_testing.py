# -*- coding: utf-8 -*-
"""
app/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista y seguro: logging moderado, sin base de datos por
defecto y Stripe en modo prueba con claves dummy.

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from typing import Literal, Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: Literal["development", "test", "production"] = Field(default="test", validation_alias="PYTHON_ENV")

    # --- Logging en test: menos ruido ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="WARNING", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "pretty", "plain"] = Field(default="pretty", validation_alias="LOG_FORMAT")

    # --- Secretos dummy (distintos entre sí) ---
    access_token_secret: SecretStr = Field(
        default=SecretStr("test-access-secret-for-gate-0123456789"),
        validation_alias=AliasChoices("ACCESS_TOKEN_SECRET", "JWT_SECRET_KEY"),
    )
    stripe_secret_key: Optional[SecretStr] = Field(
        default=SecretStr("sk_test_dummy"),
        validation_alias="STRIPE_SECRET_KEY",
    )
    stripe_webhook_secret: Optional[SecretStr] = Field(
        default=SecretStr("whsec_test_dummy"),
        validation_alias=AliasChoices("STRIPE_WEBHOOK_SECRET", "STRIPE_TEST_SECRET"),
    )

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo app/shared/config/settings_testing.py
