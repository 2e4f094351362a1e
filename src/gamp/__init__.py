"""Server-side Measurement Protocol client for submitting analytics hits."""

from gamp.client import GampClient
from gamp.domain.errors import (
    ConfigurationError,
    GampError,
    MissingArgumentError,
    TransportError,
)
from gamp.domain.models import (
    EventHit,
    ExceptionHit,
    ItemHit,
    PageviewHit,
    RequestContext,
    SocialHit,
    TimingHit,
    TransactionHit,
    UserTimingHit,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EventHit",
    "ExceptionHit",
    "GampClient",
    "GampError",
    "ItemHit",
    "MissingArgumentError",
    "PageviewHit",
    "RequestContext",
    "SocialHit",
    "TimingHit",
    "TransactionHit",
    "TransportError",
    "UserTimingHit",
    "__version__",
]
