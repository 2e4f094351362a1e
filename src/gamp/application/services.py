"""Application services (use cases) for sending hits."""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from gamp.application.hit_builders import build_hit_request
from gamp.domain import parameters as p
from gamp.domain.models import ClientConfig, Hit, HitRequest, ParamValue, SessionParameters

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from gamp.domain.ports import HitTransport


class HitService:
    """Service that assembles hit parameters and hands them to a transport."""

    def __init__(
        self,
        config: ClientConfig,
        transport: "HitTransport",
        session_parameters: SessionParameters | None = None,
        user_agent: str | None = None,
    ) -> None:
        """Initialize with the client configuration and a hit transport.

        Args:
            config: Resolved tracking identity and options.
            transport: Port used to deliver the assembled parameters.
            session_parameters: Queue of parameters for the next hit. A new,
                empty one is created when omitted.
            user_agent: User agent of the calling environment, forwarded on
                every request when set.
        """
        self._config = config
        self._transport = transport
        self._session_parameters = (
            session_parameters if session_parameters is not None else SessionParameters()
        )
        self._user_agent = user_agent

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def session_parameters(self) -> SessionParameters:
        return self._session_parameters

    def send_hit(self, hit: Hit) -> str:
        """Send a typed hit and return the raw response body."""
        return self._submit(build_hit_request(hit).parameters())

    def send(
        self,
        required: Mapping[str, ParamValue],
        optional: Mapping[str, ParamValue | None] | None = None,
    ) -> str:
        """Merge required and optional parameters and submit them.

        Optional parameters whose value is None are left out of the request.
        """
        request = HitRequest(required=dict(required), optional=dict(optional or {}))
        return self._submit(request.parameters())

    def assemble_parameters(
        self, hit_parameters: Mapping[str, ParamValue]
    ) -> dict[str, ParamValue]:
        """Add protocol, identity and queued session parameters to a hit.

        Drains the session parameters: they are included in this hit only.
        """
        data: dict[str, ParamValue] = dict(hit_parameters)
        data[p.PARAM_PROTOCOL_VERSION] = p.PROTOCOL_VERSION
        data[p.PARAM_TRACKING_ID] = self._config.tracking_id
        data[p.PARAM_CLIENT_ID] = self._config.client_id
        if self._config.anonymize_ip:
            data[p.PARAM_ANON_IP] = 1

        data.update(self._session_parameters.drain())
        return data

    def _submit(self, hit_parameters: Mapping[str, ParamValue]) -> str:
        data = self.assemble_parameters(hit_parameters)
        logger.debug(
            f"Sending {data.get(p.PARAM_HIT_TYPE, 'unknown')} hit "
            f"for {self._config.tracking_id} with {len(data)} parameter(s)"
        )
        return self._transport.send(data, user_agent=self._user_agent)
