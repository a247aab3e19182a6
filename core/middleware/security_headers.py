"""Security headers for API responses."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.constants import HSTS_HEADER, HSTS_VALUE, SECURITY_HEADERS


class SecurityHeadersMiddleware:
    """Add browser hardening headers to every response.

    Headers a view set itself are left alone. HSTS is only sent over HTTPS,
    where browsers honour it.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        response = self.get_response(request)

        for header, value in SECURITY_HEADERS.items():
            if header not in response:
                response[header] = value
        if request.is_secure() and HSTS_HEADER not in response:
            response[HSTS_HEADER] = HSTS_VALUE
        return response
