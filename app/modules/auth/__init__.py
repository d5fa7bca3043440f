# -*- coding: utf-8 -*-
"""
Módulo Auth del storefront gateway.

Expone el gate Bearer (require_identity) y las utilidades JWT.
La emisión de credenciales la realiza un proveedor externo.
"""

from .claims import CredentialVerification, IdentityClaim
from .dependencies import bearer_scheme, require_identity
from .security import (
    TokenDecodeError,
    create_access_token,
    decode_access_token,
    issue_access_token,
    verify_credential,
)

__all__ = [
    "IdentityClaim",
    "CredentialVerification",
    "TokenDecodeError",
    "create_access_token",
    "decode_access_token",
    "issue_access_token",
    "verify_credential",
    "bearer_scheme",
    "require_identity",
]
