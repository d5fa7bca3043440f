# -*- coding: utf-8 -*-
"""
app/modules/auth/claims.py

Tipos del resultado de verificar una credencial Bearer.

- IdentityClaim: payload decodificado del JWT (opaco; se preservan todos
  los campos del emisor).
- CredentialVerification: resultado explícito éxito/fallo de la
  verificación, en lugar de un callback con parámetro de error.

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict


class IdentityClaim(BaseModel):
    """
    Claims de identidad de una credencial verificada.

    Solo sub/iat/exp son conocidos; el resto de campos del emisor se
    conservan tal cual (extra="allow"). Vive únicamente durante el request.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    sub: Optional[str] = None
    iat: Optional[Union[int, float]] = None
    exp: Optional[Union[int, float]] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "IdentityClaim":
        data = dict(payload)
        if data.get("sub") is not None:
            data["sub"] = str(data["sub"])
        return cls.model_validate(data)

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True)
class CredentialVerification:
    """Resultado de verificar una credencial: claim en éxito, error en fallo."""

    claim: Optional[IdentityClaim] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.claim is not None and self.error is None

    @classmethod
    def success(cls, claim: IdentityClaim) -> "CredentialVerification":
        return cls(claim=claim)

    @classmethod
    def failure(cls, error: str) -> "CredentialVerification":
        return cls(error=error)


__all__ = ["IdentityClaim", "CredentialVerification"]
