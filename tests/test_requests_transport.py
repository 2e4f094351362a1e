"""Tests for the requests-based hit transport."""

import logging
import random
from unittest.mock import MagicMock

import pytest
import requests

from gamp.adapters.http.constants import COLLECT_URL
from gamp.adapters.http.requests_transport import RequestsHitTransport, encode_parameters
from gamp.domain.errors import TransportError


def _mock_session(text: str = "", status_code: int = 200) -> MagicMock:
    """Create a mock requests session returning a canned response."""
    response = MagicMock(spec=requests.Response)
    response.text = text
    response.status_code = status_code
    response.ok = status_code < 400
    session = MagicMock(spec=requests.Session)
    session.get.return_value = response
    session.post.return_value = response
    return session


class TestEncodeParameters:
    """Tests for encode_parameters."""

    def test_values_are_converted_to_strings(self) -> None:
        """Given mixed scalar values, then each becomes its wire string."""
        encoded = encode_parameters({"v": "1", "ev": 3, "tr": 12.5, "aip": True, "ni": False})

        assert encoded == {"v": "1", "ev": "3", "tr": "12.5", "aip": "1", "ni": "0"}


class TestPost:
    """Tests for POST transport."""

    def test_post_sends_form_body_to_collect_endpoint(self) -> None:
        """Given POST mode, then parameters are sent as form data."""
        session = _mock_session(text="ok")
        transport = RequestsHitTransport(http_method="POST", session=session)

        result = transport.send({"v": "1", "t": "event", "ev": 0})

        assert result == "ok"
        session.post.assert_called_once_with(
            COLLECT_URL, data={"v": "1", "t": "event", "ev": "0"}, headers={}, timeout=None
        )
        session.get.assert_not_called()

    def test_post_never_adds_cache_buster(self) -> None:
        """Given POST mode with cache busting enabled, then no z parameter is added."""
        session = _mock_session()
        transport = RequestsHitTransport(http_method="POST", use_cache_buster=True, session=session)

        transport.send({"t": "pageview"})

        assert "z" not in session.post.call_args.kwargs["data"]

    def test_user_agent_header_is_set(self) -> None:
        """Given a user agent, then it is sent as the User-Agent header."""
        session = _mock_session()
        transport = RequestsHitTransport(session=session)

        transport.send({"t": "pageview"}, user_agent="TestBrowser/1.0")

        assert session.post.call_args.kwargs["headers"] == {"User-Agent": "TestBrowser/1.0"}

    def test_default_user_agent_is_used_when_caller_has_none(self) -> None:
        """Given a default user agent and none from the caller, then the default is sent."""
        session = _mock_session()
        transport = RequestsHitTransport(session=session, default_user_agent="my-service/2.0")

        transport.send({"t": "pageview"})

        assert session.post.call_args.kwargs["headers"] == {"User-Agent": "my-service/2.0"}

    def test_timeout_is_passed_through(self) -> None:
        """Given a timeout, then it is passed to requests."""
        session = _mock_session()
        transport = RequestsHitTransport(session=session, timeout=2.5)

        transport.send({"t": "pageview"})

        assert session.post.call_args.kwargs["timeout"] == 2.5


class TestGet:
    """Tests for GET transport."""

    def test_get_sends_query_parameters(self) -> None:
        """Given GET mode, then parameters are sent in the query string."""
        session = _mock_session(text="body")
        transport = RequestsHitTransport(http_method="GET", session=session)

        result = transport.send({"v": "1", "t": "pageview"})

        assert result == "body"
        session.get.assert_called_once_with(
            COLLECT_URL, params={"v": "1", "t": "pageview"}, headers={}, timeout=None
        )
        session.post.assert_not_called()

    def test_cache_buster_is_fourteen_digits_and_last(self) -> None:
        """Given cache busting, then z is a 14-digit number appended last."""
        session = _mock_session()
        transport = RequestsHitTransport(http_method="GET", use_cache_buster=True, session=session)

        transport.send({"v": "1", "t": "pageview"})

        params = session.get.call_args.kwargs["params"]
        assert list(params)[-1] == "z"
        assert len(params["z"]) == 14
        assert params["z"].isdigit()

    def test_cache_buster_differs_between_calls(self) -> None:
        """Given cache busting, when sending twice, then z values differ."""
        session = _mock_session()
        transport = RequestsHitTransport(http_method="GET", use_cache_buster=True, session=session)

        transport.send({"t": "pageview"})
        transport.send({"t": "pageview"})

        first, second = (call.kwargs["params"]["z"] for call in session.get.call_args_list)
        assert first != second

    def test_cache_buster_is_zero_padded(self) -> None:
        """Given a small random number, then it is left-padded with zeros."""
        rng = MagicMock(spec=random.Random)
        rng.randint.return_value = 42
        transport = RequestsHitTransport(http_method="GET", random_source=rng)

        assert transport.cache_buster() == "00000000000042"

    def test_no_cache_buster_by_default(self) -> None:
        """Given cache busting disabled, then no z parameter is sent."""
        session = _mock_session()
        transport = RequestsHitTransport(http_method="GET", session=session)

        transport.send({"t": "pageview"})

        assert "z" not in session.get.call_args.kwargs["params"]

    def test_oversized_url_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Given an oversized URL, then a warning is logged and the hit is still sent."""
        session = _mock_session()
        transport = RequestsHitTransport(http_method="GET", session=session)

        with caplog.at_level(logging.WARNING, logger="gamp.adapters.http.requests_transport"):
            transport.send({"t": "pageview", "dt": "x" * 2500})

        assert "above the 2000 byte limit" in caplog.text
        session.get.assert_called_once()


class TestErrors:
    """Tests for transport error handling."""

    def test_request_exception_raises_transport_error(self) -> None:
        """Given a connection failure, then TransportError is raised after one attempt."""
        session = _mock_session()
        session.post.side_effect = requests.ConnectionError("connection refused")
        transport = RequestsHitTransport(session=session)

        with pytest.raises(TransportError, match="connection refused") as exc_info:
            transport.send({"t": "pageview"})

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
        assert session.post.call_count == 1

    def test_non_2xx_response_is_returned(self, caplog: pytest.LogCaptureFixture) -> None:
        """Given a 500 response, then the body is returned and a warning logged."""
        session = _mock_session(text="server error", status_code=500)
        transport = RequestsHitTransport(session=session)

        with caplog.at_level(logging.WARNING, logger="gamp.adapters.http.requests_transport"):
            result = transport.send({"t": "pageview"})

        assert result == "server error"
        assert "status 500" in caplog.text

    def test_unreachable_endpoint_raises_transport_error(self) -> None:
        """Given an endpoint nobody listens on, then TransportError is raised."""
        transport = RequestsHitTransport(endpoint_url="http://127.0.0.1:9/collect", timeout=2)

        with pytest.raises(TransportError):
            transport.send({"t": "pageview"})

        transport.close()


def test_close_only_closes_owned_session() -> None:
    """Given an injected session, when closing, then the session is left open."""
    session = _mock_session()

    with RequestsHitTransport(session=session):
        pass

    session.close.assert_not_called()
