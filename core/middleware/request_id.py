"""Request ID middleware for log correlation."""

import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

import structlog

from core.constants import REQUEST_ID_HEADER, REQUEST_ID_PATTERN
from core.logging.context import clear_request_id, set_request_id


class RequestIDMiddleware:
    """Tag each request with an ID that follows it through the logs.

    An incoming ``X-Request-ID`` is reused when it is a short token of safe
    characters; anything else is replaced by a fresh UUID. The ID is echoed in
    the response, set on ``request.request_id`` and bound into the structlog
    context for the duration of the request.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get(REQUEST_ID_HEADER, "")
        if not REQUEST_ID_PATTERN.match(request_id):
            request_id = str(uuid.uuid4())

        set_request_id(request_id)
        request.request_id = request_id  # type: ignore[attr-defined]
        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = self.get_response(request)
            response[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
            clear_request_id()
