"""Typed hit definitions, one per Measurement Protocol hit type.

Required fields come first and have no default. Optional fields default to
None, which means "not sent".
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EventHit:
    """An event (category/action pair with optional label and value)."""

    category: str
    action: str
    label: str | None = None
    value: int | None = None


@dataclass(frozen=True)
class PageviewHit:
    """A page view."""

    path: str | None = None  # Document path, e.g. "/checkout"
    title: str | None = None
    host: str | None = None  # Document host name, e.g. "example.com"
    location: str | None = None  # Full URL
    description: str | None = None  # Screen name / content description


@dataclass(frozen=True)
class TransactionHit:
    """An e-commerce transaction."""

    transaction_id: str
    affiliation: str | None = None
    revenue: float | None = None
    shipping_cost: float | None = None
    tax: float | None = None
    currency_code: str | None = None  # ISO 4217, e.g. "EUR"


@dataclass(frozen=True)
class ItemHit:
    """An e-commerce item belonging to a transaction."""

    transaction_id: str
    item_name: str
    price: float | None = None
    quantity: int | None = None
    code: str | None = None  # SKU
    category: str | None = None
    currency_code: str | None = None


@dataclass(frozen=True)
class SocialHit:
    """A social interaction, e.g. a "like" on a network."""

    social_network: str
    action: str
    target: str


@dataclass(frozen=True)
class TimingHit:
    """Browser page timing data, all values in milliseconds."""

    page_load_time: int | None = None
    dns_time: int | None = None
    page_download_time: int | None = None
    redirect_response_time: int | None = None
    tcp_connect_time: int | None = None
    server_response_time: int | None = None


@dataclass(frozen=True)
class UserTimingHit:
    """A user timing measurement (time in milliseconds)."""

    category: str | None = None
    variable: str | None = None
    time: int | None = None
    label: str | None = None


@dataclass(frozen=True)
class ExceptionHit:
    """An exception report. is_fatal is always transmitted, as 1 or 0."""

    description: str | None = None
    is_fatal: bool = False


Hit = (
    EventHit
    | PageviewHit
    | TransactionHit
    | ItemHit
    | SocialHit
    | TimingHit
    | UserTimingHit
    | ExceptionHit
)
