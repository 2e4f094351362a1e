"""Domain layer - hit models, protocol constants and ports."""

from gamp.domain.errors import (
    ConfigurationError,
    GampError,
    MissingArgumentError,
    TransportError,
)
from gamp.domain.models import (
    ClientConfig,
    HitRequest,
    RequestContext,
    SessionParameters,
)
from gamp.domain.ports import HitTransport

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "GampError",
    "HitRequest",
    "HitTransport",
    "MissingArgumentError",
    "RequestContext",
    "SessionParameters",
    "TransportError",
]
