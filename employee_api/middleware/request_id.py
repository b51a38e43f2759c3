"""
Correlation ids for employee API requests.

The client's X-Request-ID is reused when it is a short printable token;
otherwise a UUID4 is issued. The id lands on ``request.state.request_id``
and is echoed on the response.
"""

import re
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


REQUEST_ID_HEADER = "X-Request-ID"

_ACCEPTED_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")


def resolve_request_id(header_value: str | None) -> str:
    if header_value and _ACCEPTED_REQUEST_ID.match(header_value):
        return header_value
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a correlation id to every request and its response."""

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        request.state.request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        return response
