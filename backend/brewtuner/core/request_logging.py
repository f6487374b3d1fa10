"""Per-request log line for the tuning API.

Each request logs one JSON event carrying the request id and the matched
route template (``/api/v1/grind-logs/{log_id}`` rather than the concrete
path, so events group per operation). When a store error was mapped to a
response, the failing store operation and error kind ride along.
"""

from __future__ import annotations

import json
import logging
from time import perf_counter
from typing import Any
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

logger = logging.getLogger("brewtuner.request")


def _route_template(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path_format", None) or getattr(route, "path", None) or request.url.path


def _event(request: Request, request_id: str, event: str, status_code: int, started: float) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "event": event,
        "request_id": request_id,
        "method": request.method,
        "route": _route_template(request),
        "status_code": status_code,
        "duration_ms": round((perf_counter() - started) * 1000, 2),
    }
    store_error = getattr(request.state, "store_error", None)
    if store_error:
        payload["store_operation"] = getattr(request.state, "store_operation", None)
        payload["store_error"] = store_error
    return payload


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        request.state.request_id = request_id
        started = perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(json.dumps(_event(request, request_id, "request_error", 500, started)))
            response = JSONResponse(
                status_code=500,
                content={"detail": "Internal server error", "request_id": request_id},
            )
        else:
            status_code = response.status_code
            line = json.dumps(_event(request, request_id, "request_completed", status_code, started))
            if status_code >= 500:
                logger.error(line)
            elif status_code >= 400:
                logger.warning(line)
            else:
                logger.info(line)

        response.headers["X-Request-ID"] = request_id
        return response
