"""HTTP transport adapter for the Measurement Protocol collection endpoint."""

from gamp.adapters.http.constants import COLLECT_URL
from gamp.adapters.http.requests_transport import RequestsHitTransport

__all__ = ["COLLECT_URL", "RequestsHitTransport"]
