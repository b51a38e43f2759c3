"""
Access logging for the employee API.

One record per request: "Request completed" with the status code, or
"Request failed" when the handler raised. Requests routed to an
``/employees/{employee_id}`` endpoint also carry the employee id.

Registered inside RequestIDMiddleware so the correlation id is set.
"""

import time
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from employee_api.core.logging_config import get_logger, log_with_context


logger = get_logger(__name__)


def _route_template(request: Request) -> Optional[str]:
    # Populated by the router once call_next has matched the request
    route = request.scope.get("route")
    return getattr(route, "path", None)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its route, status and latency."""

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            log_with_context(
                logger,
                "error",
                "Request failed",
                request_id=getattr(request.state, "request_id", None),
                employee_id=request.path_params.get("employee_id"),
                path=request.url.path,
                method=request.method,
                latency_ms=round((time.perf_counter() - start_time) * 1000, 2),
                route=_route_template(request),
                exception_type=type(exc).__name__,
                exc_info=True,
            )
            raise

        log_with_context(
            logger,
            "warning" if response.status_code >= 500 else "info",
            "Request completed",
            request_id=getattr(request.state, "request_id", None),
            employee_id=request.path_params.get("employee_id"),
            path=request.url.path,
            method=request.method,
            status_code=response.status_code,
            latency_ms=round((time.perf_counter() - start_time) * 1000, 2),
            route=_route_template(request),
        )

        return response
