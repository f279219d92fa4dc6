"""Request context management using contextvars.

Holds request-scoped data (the request ID) so log records emitted anywhere
during a request can carry it. Async-safe: each task sees its own value.
"""

from contextvars import ContextVar

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str | None) -> None:
    """Bind the request ID for the current task."""
    _request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _request_id.get()
