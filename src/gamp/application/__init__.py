"""Application layer - identity resolution and the hit sending pipeline."""

from gamp.application.hit_builders import build_hit_request
from gamp.application.identity import resolve_client_id, validate_tracking_id
from gamp.application.services import HitService

__all__ = [
    "HitService",
    "build_hit_request",
    "resolve_client_id",
    "validate_tracking_id",
]
