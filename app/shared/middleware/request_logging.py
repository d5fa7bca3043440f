# -*- coding: utf-8 -*-
"""
app/shared/middleware/request_logging.py

Middleware para logging de requests HTTP con método, path, status y duración.

Nunca registra headers ni body: el Authorization y el Stripe-Signature
no deben llegar a los logs.

Autor: Storefront Gateway
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
import re
import time
from typing import Callable, List, Optional, Pattern

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .exception_handler import get_request_id

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Loguea una línea por request completado.

    Args:
        app: ASGI app
        include_patterns: Lista de regex patterns a incluir (default: todas)
        exclude_patterns: Lista de regex patterns a excluir (default: /health, /favicon.ico)
    """

    DEFAULT_EXCLUDE = [
        re.compile(r"^/health"),
        re.compile(r"^/favicon\.ico"),
    ]

    def __init__(
        self,
        app,
        include_patterns: Optional[List[Pattern]] = None,
        exclude_patterns: Optional[List[Pattern]] = None,
    ):
        super().__init__(app)
        self.include_patterns = include_patterns
        self.exclude_patterns = self.DEFAULT_EXCLUDE if exclude_patterns is None else exclude_patterns

    def _should_log(self, path: str) -> bool:
        if any(pattern.match(path) for pattern in self.exclude_patterns):
            return False
        if self.include_patterns:
            return any(pattern.match(path) for pattern in self.include_patterns)
        return True

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path

        if not self._should_log(path):
            return await call_next(request)

        method = request.method
        request_id = getattr(request.state, "request_id", None)
        if not request_id:
            request_id = get_request_id(request)
            request.state.request_id = request_id

        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "request_completed request_id=%s method=%s path=%s status=%d duration_ms=%.2f",
                request_id,
                method,
                path,
                status_code,
                duration_ms,
            )

        return response


__all__ = ["RequestLoggingMiddleware"]
