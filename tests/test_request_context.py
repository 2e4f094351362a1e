"""Tests for request context extraction helpers."""

import pytest

from gamp.adapters.web.request_context import (
    get_cookie_value,
    get_request_context_from_environ,
    get_request_context_from_headers,
    get_request_context_from_scope,
)


def test_get_request_context_from_scope_with_full_data() -> None:
    """Given a scope with user agent and _ga cookie, then extract both values."""
    scope = {
        "client": ("203.0.113.10", 54321),
        "headers": [
            (b"host", b"example.test"),
            (b"user-agent", b"TestBrowser/1.0 (TestOS)"),
            (b"cookie", b"other=ignore-me; _ga=GA1.2.111111111.222222222"),
        ],
    }

    context = get_request_context_from_scope(scope)

    assert context.user_agent == "TestBrowser/1.0 (TestOS)"
    assert context.ga_cookie == "GA1.2.111111111.222222222"


def test_get_request_context_from_scope_without_headers() -> None:
    """Given a scope without headers, then both values are None."""
    context = get_request_context_from_scope({"client": ("198.51.100.42", 12345)})

    assert context.user_agent is None
    assert context.ga_cookie is None


def test_get_request_context_from_scope_with_invalid_scope() -> None:
    """Given an invalid scope, then both values are None."""
    context = get_request_context_from_scope(None)

    assert context.user_agent is None
    assert context.ga_cookie is None


def test_get_request_context_from_scope_decodes_latin1() -> None:
    """Given a non-UTF-8 header value, then it is decoded as latin-1."""
    scope = {"headers": [(b"user-agent", "Bröwser".encode("latin1"))]}

    assert get_request_context_from_scope(scope).user_agent == "Bröwser"


def test_get_request_context_from_environ() -> None:
    """Given a WSGI environ, then HTTP_USER_AGENT and the _ga cookie are read."""
    environ = {
        "REQUEST_METHOD": "GET",
        "HTTP_USER_AGENT": "AnotherBrowser/2.0",
        "HTTP_COOKIE": "_ga=GA1.2.333333333.444444444; _gid=GA1.2.1.1",
    }

    context = get_request_context_from_environ(environ)

    assert context.user_agent == "AnotherBrowser/2.0"
    assert context.ga_cookie == "GA1.2.333333333.444444444"


def test_get_request_context_from_empty_environ() -> None:
    """Given an empty environ, then both values are None."""
    context = get_request_context_from_environ({})

    assert context.user_agent is None
    assert context.ga_cookie is None


def test_get_request_context_from_headers_is_case_insensitive() -> None:
    """Given mixed-case header names, then values are still found."""
    context = get_request_context_from_headers(
        {"USER-AGENT": "curl/8.0", "Cookie": "_ga=GA1.2.555555555.666666666"}
    )

    assert context.user_agent == "curl/8.0"
    assert context.ga_cookie == "GA1.2.555555555.666666666"


def test_get_cookie_value_ignores_similar_names() -> None:
    """Given cookies whose names only start with _ga, then they are not matched."""
    assert get_cookie_value("_gat=1; _gid=GA1.2.3.4") is None
    assert get_cookie_value("_ga=") is None
    assert get_cookie_value(None) is None


@pytest.mark.parametrize(
    "headers",
    [
        [(b"user-agent",)],
        [(b"user-agent", b"TestBrowser/1.0", b"extra")],
        [None],
        "garbage",
        {"user-agent": "TestBrowser/1.0"},
    ],
)
def test_get_request_context_from_scope_with_malformed_headers(headers: object) -> None:
    """Given malformed header entries, then they are skipped and both values are None."""
    context = get_request_context_from_scope({"headers": headers})

    assert context.user_agent is None
    assert context.ga_cookie is None


def test_get_request_context_from_scope_keeps_valid_entries_beside_malformed_ones() -> None:
    """Given a mix of malformed and valid header entries, then the valid ones are read."""
    scope = {"headers": [None, (b"cookie",), (b"user-agent", b"TestBrowser/1.0")]}

    assert get_request_context_from_scope(scope).user_agent == "TestBrowser/1.0"
