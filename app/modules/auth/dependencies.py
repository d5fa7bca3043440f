# -*- coding: utf-8 -*-
"""
app/modules/auth/dependencies.py

Gate de autenticación Bearer para FastAPI.

Contrato:
- Sin credencial Bearer (header ausente, vacío u otro esquema) → 401,
  sin intentar verificación.
- Credencial presente pero inválida/expirada/malformada → 403.
- Credencial válida → el claim se adjunta a request.state.user y la
  dependencia lo devuelve al handler.

No hay reintentos ni cache: cada request verifica su propia credencial.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.shared.config import BaseAppSettings, get_settings

from .claims import IdentityClaim
from .security import verify_credential

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(
    auto_error=False,
    description="JWT emitido por el proveedor de identidad del storefront.",
)


async def require_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: BaseAppSettings = Depends(get_settings),
) -> IdentityClaim:
    """
    Dependencia para rutas protegidas.

    Raises:
        HTTPException 401: Si no se presentó credencial Bearer.
        HTTPException 403: Si la credencial no verifica.

    Returns:
        IdentityClaim: claims de la credencial verificada.
    """
    if credentials is None or not credentials.credentials:
        logger.debug("Auth rejected (no credential): %s %s", request.method, request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    result = await verify_credential(credentials.credentials, settings)
    if not result.ok:
        logger.debug(
            "Auth rejected (invalid credential): %s %s reason=%s",
            request.method, request.url.path, result.error,
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired credentials",
        )

    request.state.user = result.claim
    return result.claim


__all__ = ["bearer_scheme", "require_identity"]
