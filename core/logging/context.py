"""Request ID for the request being served.

Stored in a ``ContextVar`` so sync workers and ASGI tasks each see their own.
"""

from contextvars import ContextVar

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str) -> None:
    """Set the current request ID."""
    _request_id.set(request_id)


def get_request_id() -> str | None:
    """The current request ID, or None outside a request."""
    return _request_id.get()


def clear_request_id() -> None:
    """Forget the request ID once the response is sent."""
    _request_id.set(None)
