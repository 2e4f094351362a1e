"""Domain models for Measurement Protocol hits."""

from gamp.domain.models.client_config import ClientConfig, HttpMethod
from gamp.domain.models.hit_request import HitRequest, ParamValue
from gamp.domain.models.hits import (
    EventHit,
    ExceptionHit,
    Hit,
    ItemHit,
    PageviewHit,
    SocialHit,
    TimingHit,
    TransactionHit,
    UserTimingHit,
)
from gamp.domain.models.request_context import RequestContext
from gamp.domain.models.session_parameters import SessionParameters

__all__ = [
    "ClientConfig",
    "EventHit",
    "ExceptionHit",
    "Hit",
    "HitRequest",
    "HttpMethod",
    "ItemHit",
    "PageviewHit",
    "ParamValue",
    "RequestContext",
    "SessionParameters",
    "SocialHit",
    "TimingHit",
    "TransactionHit",
    "UserTimingHit",
]
