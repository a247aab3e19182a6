"""DRF exception handler for the blog service.

Every error leaves the API with the same body::

    {"error": <code>, "message": <text>, "status": <http status>,
     "request_id": <id>, "timestamp": <iso8601>}

DRF validation errors add an ``errors`` list.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from django.conf import settings

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions.blog_exceptions import BlogServiceError
from core.logging.context import get_request_id

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."

STATUS_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_401_UNAUTHORIZED: "not_authenticated",
    status.HTTP_403_FORBIDDEN: "permission_denied",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Render ``exc`` as a JSON error response.

    DRF exceptions (and the Django ``Http404``/``PermissionDenied`` DRF
    converts) keep their status; ``BlogServiceError`` subclasses use their own
    ``status_code`` and ``error_code``; anything else is a 500 with a generic
    message.

    Args:
        exc: The exception raised by the view.
        context: DRF handler context with the view and request.

    Returns:
        The error response.
    """
    view = context.get("view")
    request = getattr(view, "request", None) or context.get("request")
    request_id = get_request_id()

    response = exception_handler(exc, context)
    if response is not None:
        response.data = _reshape_drf_error(exc, response, request_id)
    elif isinstance(exc, BlogServiceError):
        response = Response(
            _error_body(exc.status_code, exc.error_code, str(exc), request_id),
            status=exc.status_code,
        )
    else:
        response = Response(
            _error_body(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "internal_error",
                INTERNAL_ERROR_MESSAGE,
                request_id,
            ),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if request_id:
        response["X-Request-ID"] = request_id

    _log_exception(exc, request, response.status_code)
    return response


def _error_body(
    status_code: int, code: str, message: str, request_id: str | None
) -> dict[str, Any]:
    return {
        "error": code,
        "message": message,
        "status": status_code,
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def _reshape_drf_error(
    exc: Exception, response: Response, request_id: str | None
) -> dict[str, Any]:
    """Move DRF's ``{"detail": ...}`` payload into the shared error body."""
    if isinstance(exc, APIException):
        code = exc.default_code
    else:
        code = STATUS_ERROR_CODES.get(response.status_code, "error")

    data = response.data
    if isinstance(data, dict) and "detail" in data:
        return _error_body(response.status_code, code, str(data["detail"]), request_id)

    body = _error_body(
        response.status_code, code, "Invalid request parameters", request_id
    )
    body["errors"] = data
    return body


def _log_exception(exc: Exception, request: Any, status_code: int) -> None:
    """Log one line per handled exception.

    Client errors log at WARNING, server errors at ERROR with the traceback.
    With DEBUG on, client errors carry the traceback too.
    """
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    with_traceback = level >= logging.ERROR or settings.DEBUG

    logger.log(
        level,
        "%s %s -> %s (%s: %s)",
        getattr(request, "method", "-"),
        getattr(request, "path", "-"),
        status_code,
        type(exc).__name__,
        exc,
        exc_info=(type(exc), exc, exc.__traceback__) if with_traceback else None,
    )
