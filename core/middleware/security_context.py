"""Security context middleware for authenticated user access."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.auth.context import clear_current_user


class SecurityContextMiddleware:
    """Middleware that scopes the security context to a single request.

    ``OAuth2Authentication`` stores the resolved identity in thread-local
    storage when a view authenticates the request. This middleware clears that
    storage before and after every request so an identity never survives into
    the next request handled by the same worker thread.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request inside a fresh security context."""
        clear_current_user()
        try:
            return self.get_response(request)
        finally:
            clear_current_user()
