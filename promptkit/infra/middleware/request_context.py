"""
Request context middleware for structured logging.
"""

from __future__ import annotations

import time
from typing import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from promptkit.infra.config.logging_config import (
    bind_context,
    clear_context,
    get_logger,
)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Adds a request_id and basic request info to structlog context.

    Logs request start/end with timing and propagates the X-Request-ID header.
    """

    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:  # type: ignore[override]
        request_id = request.headers.get("x-request-id") or str(uuid4())
        client = request.client.host if request.client else None

        bind_context(
            request_id=request_id, path=str(request.url.path), method=request.method
        )
        logger = get_logger("http")

        started = time.perf_counter()
        logger.info("request.start", client_ip=client)
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            logger.info(
                "request.end",
                status_code=response.status_code,
                elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        except Exception as exc:  # pragma: no cover
            logger.exception("request.error", error=str(exc))
            raise
        finally:
            clear_context()
