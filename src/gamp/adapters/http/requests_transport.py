"""requests-based hit transport.

Sends one blocking request per hit: POST with a form-encoded body, or GET
with the parameters in the query string.
"""

import logging
import random
from collections.abc import Mapping
from urllib.parse import urlencode

import requests

from gamp.adapters.api_request_logger import log_api_request
from gamp.adapters.http.constants import (
    CACHE_BUSTER_DIGITS,
    COLLECT_URL,
    MAX_GET_URL_LENGTH,
    MAX_POST_BODY_LENGTH,
)
from gamp.domain.errors import TransportError
from gamp.domain.models import HttpMethod, ParamValue
from gamp.domain.parameters import PARAM_CACHE_BUSTER
from gamp.domain.ports.hit_transport import HitTransport

logger = logging.getLogger(__name__)


def encode_parameters(parameters: Mapping[str, ParamValue]) -> dict[str, str]:
    """Convert parameter values to the strings sent on the wire.

    Booleans become "1"/"0", everything else its str() form.
    """
    encoded: dict[str, str] = {}
    for key, value in parameters.items():
        if isinstance(value, bool):
            encoded[key] = "1" if value else "0"
        else:
            encoded[key] = str(value)
    return encoded


class RequestsHitTransport(HitTransport):
    """Adapter delivering hits to the collection endpoint with requests."""

    def __init__(
        self,
        http_method: HttpMethod = "POST",
        use_cache_buster: bool = False,
        endpoint_url: str = COLLECT_URL,
        session: requests.Session | None = None,
        timeout: float | None = None,
        default_user_agent: str | None = None,
        random_source: random.Random | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            http_method: "GET" or "POST".
            use_cache_buster: Append a random "z" parameter to GET requests.
            endpoint_url: Collection endpoint.
            session: Optional requests session; one is created when omitted.
            timeout: Request timeout in seconds. None leaves requests' default (no timeout).
            default_user_agent: User agent sent when the caller does not supply one.
            random_source: Source of cache-buster numbers.
        """
        self.http_method = http_method
        self.use_cache_buster = use_cache_buster
        self.endpoint_url = endpoint_url
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._timeout = timeout
        self._default_user_agent = default_user_agent
        self._random = random_source or random.Random()

    def cache_buster(self) -> str:
        """Return a zero-padded random number of CACHE_BUSTER_DIGITS digits."""
        upper = 10**CACHE_BUSTER_DIGITS - 1
        return str(self._random.randint(0, upper)).zfill(CACHE_BUSTER_DIGITS)

    def _build_headers(self, user_agent: str | None) -> dict[str, str]:
        agent = user_agent or self._default_user_agent
        return {"User-Agent": agent} if agent else {}

    def _warn_if_oversized(self, fields: dict[str, str]) -> None:
        """Log payloads above the documented limits. The endpoint may drop them."""
        encoded = urlencode(list(fields.items()))
        if self.http_method == "GET":
            length = len(self.endpoint_url) + 1 + len(encoded)
            if length > MAX_GET_URL_LENGTH:
                logger.warning(
                    f"GET hit URL is {length} bytes, above the {MAX_GET_URL_LENGTH} byte limit"
                )
        elif len(encoded) > MAX_POST_BODY_LENGTH:
            logger.warning(
                f"POST hit body is {len(encoded)} bytes, "
                f"above the {MAX_POST_BODY_LENGTH} byte limit"
            )

    def _request(self, fields: dict[str, str], headers: dict[str, str]) -> requests.Response:
        if self.http_method == "GET":
            if self.use_cache_buster:
                # Keep the cache buster as the last query parameter
                fields.pop(PARAM_CACHE_BUSTER, None)
                fields[PARAM_CACHE_BUSTER] = self.cache_buster()
            self._warn_if_oversized(fields)
            log_api_request("GET", self.endpoint_url, params=fields, headers=headers)
            return self._session.get(
                self.endpoint_url, params=fields, headers=headers, timeout=self._timeout
            )

        self._warn_if_oversized(fields)
        log_api_request("POST", self.endpoint_url, headers=headers, payload=fields)
        return self._session.post(
            self.endpoint_url, data=fields, headers=headers, timeout=self._timeout
        )

    def send(self, parameters: Mapping[str, ParamValue], user_agent: str | None = None) -> str:
        """Send one hit and return the raw response body.

        Raises:
            TransportError: If the request fails at the connection level.
        """
        fields = encode_parameters(parameters)
        headers = self._build_headers(user_agent)

        try:
            response = self._request(fields, headers)
        except requests.RequestException as e:
            logger.warning(f"{self.http_method} {self.endpoint_url} failed: {e}")
            raise TransportError(str(e)) from e

        if not response.ok:
            logger.warning(
                f"Collection endpoint returned status {response.status_code} "
                f"for {self.http_method} {self.endpoint_url}"
            )
        return response.text

    def close(self) -> None:
        """Close the underlying session if this transport created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "RequestsHitTransport":
        return self

    def __exit__(self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object) -> None:
        self.close()
