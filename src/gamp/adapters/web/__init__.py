"""Web adapters - calling-environment extraction for server-side hits."""

from gamp.adapters.web.request_context import (
    get_request_context_from_environ,
    get_request_context_from_headers,
    get_request_context_from_scope,
)

__all__ = [
    "get_request_context_from_environ",
    "get_request_context_from_headers",
    "get_request_context_from_scope",
]
