"""Session parameters domain model."""

import logging
import re
from collections.abc import Iterator, Mapping

from gamp.domain.models.hit_request import ParamValue
from gamp.domain.parameters import DIMENSION_KEY_PATTERN, METRIC_KEY_PATTERN

logger = logging.getLogger(__name__)

_DIMENSION_KEY_RE = re.compile(DIMENSION_KEY_PATTERN)
_METRIC_KEY_RE = re.compile(METRIC_KEY_PATTERN)


class SessionParameters:
    """Parameters queued for delivery with the next hit.

    Every send drains the whole collection, so a value set here is delivered
    exactly once. This applies regardless of the scope the parameter has in
    the analytics property (hit, session or user); callers that need a value
    on several hits must set it again before each one.

    Not thread-safe: one instance belongs to one client.
    """

    def __init__(self) -> None:
        """Initialize an empty collection."""
        self._values: dict[str, ParamValue] = {}

    def set_dimensions(self, dimensions: Mapping[str, ParamValue]) -> None:
        """Queue custom dimensions. Keys that are not of the form cd<N> are dropped."""
        self._merge_matching(dimensions, _DIMENSION_KEY_RE, "dimension")

    def set_metrics(self, metrics: Mapping[str, ParamValue]) -> None:
        """Queue custom metrics. Keys that are not of the form cm<N> are dropped."""
        self._merge_matching(metrics, _METRIC_KEY_RE, "metric")

    def update(self, parameters: Mapping[str, ParamValue | None]) -> None:
        """Queue arbitrary protocol parameters, skipping None values."""
        for key, value in parameters.items():
            if value is not None:
                self._values[key] = value

    def drain(self) -> dict[str, ParamValue]:
        """Return all queued parameters and clear the collection."""
        values = self._values
        self._values = {}
        return values

    def as_dict(self) -> dict[str, ParamValue]:
        """Return a copy of the queued parameters without clearing them."""
        return dict(self._values)

    def _merge_matching(
        self, values: Mapping[str, ParamValue], pattern: re.Pattern[str], kind: str
    ) -> None:
        for key, value in values.items():
            if isinstance(key, str) and pattern.fullmatch(key):
                self._values[key] = value
            else:
                logger.debug(f"Ignoring custom {kind} with invalid key {key!r}")

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)
