"""Process time middleware for spotting slow endpoints."""

import logging
import time
from collections.abc import Callable

from django.conf import settings
from django.http import HttpRequest, HttpResponse

from core.constants import PROCESS_TIME_HEADER, SLOW_REQUEST_THRESHOLD

logger = logging.getLogger(__name__)


class ProcessTimeMiddleware:
    """Report how long each request took.

    The duration in seconds goes into ``X-Process-Time``. Requests slower than
    ``settings.SLOW_REQUEST_THRESHOLD`` are logged at WARNING with the
    matched route, so the dashboard and search endpoints can be told apart
    from their query strings.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response
        self.threshold = getattr(
            settings, "SLOW_REQUEST_THRESHOLD", SLOW_REQUEST_THRESHOLD
        )

    def __call__(self, request: HttpRequest) -> HttpResponse:
        started = time.perf_counter()
        response = self.get_response(request)
        elapsed = time.perf_counter() - started

        response[PROCESS_TIME_HEADER] = f"{elapsed:.6f}"
        if elapsed > self.threshold:
            match = getattr(request, "resolver_match", None)
            logger.warning(
                "Slow request: %s %s (route=%s) took %.3fs, threshold %.1fs",
                request.method,
                request.path,
                match.view_name if match else "-",
                elapsed,
                self.threshold,
            )
        return response
