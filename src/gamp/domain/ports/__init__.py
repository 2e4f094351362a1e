"""Ports (interfaces) for the ports-and-adapters architecture."""

from gamp.domain.ports.hit_transport import HitTransport

__all__ = ["HitTransport"]
