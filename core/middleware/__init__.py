"""Middleware components for the blog service."""

from core.middleware.process_time import ProcessTimeMiddleware
from core.middleware.request_id import RequestIDMiddleware
from core.middleware.security_context import SecurityContextMiddleware
from core.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "ProcessTimeMiddleware",
    "RequestIDMiddleware",
    "SecurityContextMiddleware",
    "SecurityHeadersMiddleware",
]
