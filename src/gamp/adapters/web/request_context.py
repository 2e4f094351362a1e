"""Utilities for extracting the hit request context from an inbound web request.

Supports ASGI scopes (Starlette, FastAPI, ...) and WSGI environs (Flask,
Django, ...). Only the user agent and the ``_ga`` cookie are read.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gamp.domain.models import RequestContext

GA_COOKIE_NAME = "_ga"


def _decode_header_value(value: Any) -> str:
    """Decode a header value into a readable string."""
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return value.decode("latin1", errors="replace")
    return str(value)


def get_cookie_value(cookie_header: str | None, name: str = GA_COOKIE_NAME) -> str | None:
    """Return the value of one cookie from a Cookie header, or None."""
    if not cookie_header:
        return None
    for part in cookie_header.split(";"):
        name_value = part.strip().split("=", 1)
        if len(name_value) == 2 and name_value[0] == name:
            return name_value[1] or None
    return None


def get_request_context_from_headers(headers: Mapping[str, str] | None) -> RequestContext:
    """Build a request context from a plain header mapping (case-insensitive names)."""
    if not headers:
        return RequestContext()

    user_agent: str | None = None
    cookie_header: str | None = None
    for name, value in headers.items():
        lowered = name.lower()
        if lowered == "user-agent":
            user_agent = value or None
        elif lowered == "cookie":
            cookie_header = value

    return RequestContext(user_agent=user_agent, ga_cookie=get_cookie_value(cookie_header))


def get_request_context_from_scope(scope: dict[str, Any] | None) -> RequestContext:
    """Extract the user agent and _ga cookie from an ASGI scope-like mapping.

    When the scope is missing or malformed the returned context is empty.
    """
    if not isinstance(scope, dict):
        return RequestContext()

    user_agent: str | None = None
    cookie_header: str | None = None

    headers = scope.get("headers")
    if not isinstance(headers, list | tuple):
        headers = []
    for entry in headers:
        if not isinstance(entry, list | tuple) or len(entry) != 2:
            continue
        name, value = entry
        decoded_name = _decode_header_value(name).lower()
        if decoded_name == "user-agent":
            user_agent = _decode_header_value(value) or None
        elif decoded_name == "cookie":
            cookie_header = _decode_header_value(value)

    return RequestContext(user_agent=user_agent, ga_cookie=get_cookie_value(cookie_header))


def get_request_context_from_environ(environ: Mapping[str, Any] | None) -> RequestContext:
    """Extract the user agent and _ga cookie from a WSGI environ."""
    if not environ:
        return RequestContext()

    user_agent = environ.get("HTTP_USER_AGENT") or None
    cookie_header = environ.get("HTTP_COOKIE")
    return RequestContext(user_agent=user_agent, ga_cookie=get_cookie_value(cookie_header))
