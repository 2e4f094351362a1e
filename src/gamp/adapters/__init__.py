"""Adapters layer - external system integrations."""

from gamp.adapters.config import AppConfig
from gamp.adapters.http import RequestsHitTransport

__all__ = [
    "AppConfig",
    "RequestsHitTransport",
]
