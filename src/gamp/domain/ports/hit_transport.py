"""Hit transport port."""

from collections.abc import Mapping
from typing import Protocol

from gamp.domain.models.hit_request import ParamValue


class HitTransport(Protocol):
    """Port for delivering a fully assembled parameter set to the collection endpoint."""

    def send(self, parameters: Mapping[str, ParamValue], user_agent: str | None = None) -> str:
        """Issue one request and return the raw response body.

        Raises:
            TransportError: If the request could not be completed.
        """
        ...
