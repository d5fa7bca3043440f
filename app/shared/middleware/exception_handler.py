# -*- coding: utf-8 -*-
"""
app/shared/middleware/exception_handler.py

Middleware ASGI para capturar excepciones no manejadas y responder JSON.

Cualquier error no controlado en un handler termina como 500 con body JSON
({"detail": {error_code, message, request_id}}) en lugar de text/plain, y
el request_id se propaga en el header X-Request-ID.

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

# Headers de correlación aceptados (proxy, load balancer, cliente)
REQUEST_ID_HEADERS = ["x-request-id", "x-correlation-id"]
REQUEST_ID_RESPONSE_HEADER = "X-Request-ID"


def get_request_id(request: Request) -> str:
    """Extrae request_id de headers o genera uno nuevo."""
    for header in REQUEST_ID_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return uuid.uuid4().hex[:16]


class JSONExceptionMiddleware(BaseHTTPMiddleware):
    """
    Captura excepciones no manejadas y devuelve JSON 500.

    Las HTTPException de FastAPI (401/403/400 del gate y del webhook) no
    llegan aquí: las resuelve el exception handler de la app antes.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = get_request_id(request)
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "unhandled_exception request_id=%s method=%s path=%s error=%r",
                request_id,
                request.method,
                request.url.path,
                e,
            )
            return JSONResponse(
                status_code=500,
                content={
                    "detail": {
                        "error_code": "INTERNAL_SERVER_ERROR",
                        "message": "Internal server error",
                        "request_id": request_id,
                    }
                },
                headers={REQUEST_ID_RESPONSE_HEADER: request_id},
            )

        response.headers.setdefault(REQUEST_ID_RESPONSE_HEADER, request_id)
        return response


__all__ = ["JSONExceptionMiddleware", "get_request_id", "REQUEST_ID_HEADERS"]
