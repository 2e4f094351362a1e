"""Tracking identity resolution.

A hit is attributed to a property (the tracking ID, "UA-XXXX-Y") and to a
visitor (the client ID). The client ID is taken from the first source that
yields one:

1. a caller-supplied value ending in the analytics.js cookie format
   ``<9 digits>.<9 digits>`` (any leading "GA1.2." style prefix is dropped);
2. a caller-supplied UUID v4, used verbatim;
3. the inbound ``_ga`` cookie, minus its 6-character "GA1.2." prefix;
4. a freshly generated UUID v4.
"""

import logging
import re
import uuid

from gamp.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Multi-digit property indexes (UA-12345-10) are valid property IDs, so both
# numeric parts take one or more digits
_TRACKING_ID_RE = re.compile(r"UA-\d+-\d+")
_COOKIE_CLIENT_ID_RE = re.compile(r"(\d{9}\.\d{9})$")
_UUID4_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)

# Length of the "GA1.2." version/domain-depth prefix on the _ga cookie
GA_COOKIE_PREFIX_LENGTH = 6


def validate_tracking_id(tracking_id: str | None) -> str:
    """Return the tracking ID if it is well-formed.

    Raises:
        ConfigurationError: If the ID is missing or not of the form UA-<digits>-<digits>.
    """
    if not isinstance(tracking_id, str) or not _TRACKING_ID_RE.fullmatch(tracking_id):
        raise ConfigurationError(f"Tracking ID is not in the correct format: {tracking_id!r}")
    return tracking_id


def generate_client_id() -> str:
    """Generate a random UUID v4 client ID."""
    return str(uuid.uuid4())


def client_id_from_cookie(ga_cookie: str | None) -> str | None:
    """Extract the client ID from a raw ``_ga`` cookie value, if there is one."""
    if not ga_cookie:
        return None
    client_id = ga_cookie[GA_COOKIE_PREFIX_LENGTH:]
    return client_id or None


def resolve_client_id(client_id: str | None = None, ga_cookie: str | None = None) -> str:
    """Resolve the visitor's client ID.

    Args:
        client_id: Optional caller-supplied client ID.
        ga_cookie: Optional raw value of the inbound ``_ga`` cookie.

    Returns:
        A non-empty client ID string.
    """
    if client_id:
        match = _COOKIE_CLIENT_ID_RE.search(client_id)
        if match:
            return match.group(1)

        if _UUID4_RE.fullmatch(client_id):
            return client_id

        logger.debug(f"Client ID {client_id!r} is not in a recognised format, ignoring it")

    from_cookie = client_id_from_cookie(ga_cookie)
    if from_cookie:
        logger.debug("Using client ID from _ga cookie")
        return from_cookie

    logger.debug("No client ID available, generating a new one")
    return generate_client_id()
