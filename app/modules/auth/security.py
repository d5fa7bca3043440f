# -*- coding: utf-8 -*-
"""
app/modules/auth/security.py

Módulo de seguridad para el gate Bearer:
- Creación / decodificación de JWT (python-jose)
- Verificación asíncrona de credenciales con resultado explícito

El secreto y el algoritmo se reciben siempre como argumentos (vienen del
settings inmutable inyectado); este módulo no lee variables de entorno.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Union

from fastapi.concurrency import run_in_threadpool
from jose import JOSEError, jwt

from app.shared.config import BaseAppSettings

from .claims import CredentialVerification, IdentityClaim


# -----------------------------------------------------------------------------
# Manejo de JWT
# -----------------------------------------------------------------------------
class TokenDecodeError(Exception):
    """Error al decodificar/validar un token JWT."""


def create_access_token(
    subject: Union[str, int],
    secret: str,
    algorithm: str = "HS256",
    expires_delta: Optional[timedelta] = None,
    **extra: Any,
) -> str:
    """
    Crea un JWT con claims 'sub', 'iat', 'exp' y metadatos opcionales en `extra`.

    La emisión de credenciales pertenece a un emisor externo; esta función
    existe para desarrollo local y pruebas.
    """
    now = datetime.now(tz=timezone.utc)
    expire = now + (expires_delta if expires_delta is not None else timedelta(minutes=60))
    to_encode: Dict[str, Any] = {
        "sub": str(subject),
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    if extra:
        to_encode.update(extra)
    return jwt.encode(to_encode, secret, algorithm=algorithm)


def issue_access_token(
    subject: Union[str, int],
    settings: BaseAppSettings,
    expires_delta: Optional[timedelta] = None,
    **extra: Any,
) -> str:
    """
    Emite un JWT con el secreto, algoritmo y vigencia de los settings
    (ACCESS_TOKEN_EXPIRE_MINUTES salvo que se indique expires_delta).
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    return create_access_token(
        subject,
        settings.get_access_token_secret(),
        algorithm=settings.jwt_algorithm,
        expires_delta=expires_delta,
        **extra,
    )


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """
    Decodifica y valida firma y expiración de un JWT.
    Lanza TokenDecodeError si es inválido, expirado o malformado.
    """
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except JOSEError as e:
        raise TokenDecodeError(str(e) or "Token inválido o expirado") from e


async def verify_credential(token: str, settings: BaseAppSettings) -> CredentialVerification:
    """
    Verifica una credencial Bearer contra el secreto del proceso.

    La decodificación corre en el threadpool; el request queda suspendido
    hasta que se resuelve en éxito o fallo. Nunca lanza por un token malo.
    """
    try:
        payload = await run_in_threadpool(
            decode_access_token,
            token,
            settings.get_access_token_secret(),
            settings.jwt_algorithm,
        )
    except TokenDecodeError as e:
        return CredentialVerification.failure(str(e))

    return CredentialVerification.success(IdentityClaim.from_payload(payload))


__all__ = [
    "TokenDecodeError",
    "create_access_token",
    "issue_access_token",
    "decode_access_token",
    "verify_credential",
]
# Fin del archivo app/modules/auth/security.py
