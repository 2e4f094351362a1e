"""Mapping of typed hits onto Measurement Protocol parameters."""

from collections.abc import Callable
from typing import Any

from gamp.domain import parameters as p
from gamp.domain.errors import MissingArgumentError
from gamp.domain.models import (
    EventHit,
    ExceptionHit,
    HitRequest,
    ItemHit,
    PageviewHit,
    SocialHit,
    TimingHit,
    TransactionHit,
    UserTimingHit,
)


def _require(hit: Any, hit_type: str, *field_names: str) -> None:
    """Raise MissingArgumentError for the first required field that is None."""
    for field_name in field_names:
        if getattr(hit, field_name, None) is None:
            raise MissingArgumentError(hit_type, field_name)


def build_event_request(hit: EventHit) -> HitRequest:
    """Build the parameters for an event hit."""
    _require(hit, p.HIT_TYPE_EVENT, "category", "action")
    return HitRequest(
        required={
            p.PARAM_HIT_TYPE: p.HIT_TYPE_EVENT,
            p.PARAM_EVENT_CATEGORY: hit.category,
            p.PARAM_EVENT_ACTION: hit.action,
        },
        optional={
            p.PARAM_EVENT_LABEL: hit.label,
            p.PARAM_EVENT_VALUE: hit.value,
        },
    )


def build_pageview_request(hit: PageviewHit) -> HitRequest:
    """Build the parameters for a pageview hit."""
    return HitRequest(
        required={p.PARAM_HIT_TYPE: p.HIT_TYPE_PAGEVIEW},
        optional={
            p.PARAM_DOC_PATH: hit.path,
            p.PARAM_DOC_TITLE: hit.title,
            p.PARAM_DOC_HOST: hit.host,
            p.PARAM_DOC_LOCATION: hit.location,
            p.PARAM_CONTENT_DESC: hit.description,
        },
    )


def build_transaction_request(hit: TransactionHit) -> HitRequest:
    """Build the parameters for an e-commerce transaction hit."""
    _require(hit, p.HIT_TYPE_TRANSACTION, "transaction_id")
    return HitRequest(
        required={
            p.PARAM_HIT_TYPE: p.HIT_TYPE_TRANSACTION,
            p.PARAM_TRANS_ID: hit.transaction_id,
        },
        optional={
            p.PARAM_TRANS_AFFILIATION: hit.affiliation,
            p.PARAM_TRANS_REVENUE: hit.revenue,
            p.PARAM_TRANS_SHIPPING: hit.shipping_cost,
            p.PARAM_TRANS_TAX: hit.tax,
            p.PARAM_CURRENCY_CODE: hit.currency_code,
        },
    )


def build_item_request(hit: ItemHit) -> HitRequest:
    """Build the parameters for an e-commerce item hit."""
    _require(hit, p.HIT_TYPE_ITEM, "transaction_id", "item_name")
    return HitRequest(
        required={
            p.PARAM_HIT_TYPE: p.HIT_TYPE_ITEM,
            p.PARAM_TRANS_ID: hit.transaction_id,
            p.PARAM_ITEM_NAME: hit.item_name,
        },
        optional={
            p.PARAM_ITEM_PRICE: hit.price,
            p.PARAM_ITEM_QUANTITY: hit.quantity,
            p.PARAM_ITEM_CODE: hit.code,
            p.PARAM_ITEM_CATEGORY: hit.category,
            p.PARAM_CURRENCY_CODE: hit.currency_code,
        },
    )


def build_social_request(hit: SocialHit) -> HitRequest:
    """Build the parameters for a social interaction hit."""
    _require(hit, p.HIT_TYPE_SOCIAL, "social_network", "action", "target")
    return HitRequest(
        required={
            p.PARAM_HIT_TYPE: p.HIT_TYPE_SOCIAL,
            p.PARAM_SOCIAL_NETWORK: hit.social_network,
            p.PARAM_SOCIAL_ACTION: hit.action,
            p.PARAM_SOCIAL_ACTION_TARGET: hit.target,
        },
    )


def build_timing_request(hit: TimingHit) -> HitRequest:
    """Build the parameters for a page timing hit."""
    return HitRequest(
        required={p.PARAM_HIT_TYPE: p.HIT_TYPE_TIMING},
        optional={
            p.PARAM_PAGE_LOAD_TIME: hit.page_load_time,
            p.PARAM_DNS_TIME: hit.dns_time,
            p.PARAM_DOWNLOAD_TIME: hit.page_download_time,
            p.PARAM_REDIRECT_RESPONSE_TIME: hit.redirect_response_time,
            p.PARAM_TCP_CONNECT_TIME: hit.tcp_connect_time,
            p.PARAM_SERVER_RESPONSE_TIME: hit.server_response_time,
        },
    )


def build_user_timing_request(hit: UserTimingHit) -> HitRequest:
    """Build the parameters for a user timing hit.

    User timings share the "timing" hit type with page timings; only the
    parameter keys differ.
    """
    return HitRequest(
        required={p.PARAM_HIT_TYPE: p.HIT_TYPE_TIMING},
        optional={
            p.PARAM_USER_TIMING_CATEGORY: hit.category,
            p.PARAM_USER_TIMING_VARIABLE: hit.variable,
            p.PARAM_USER_TIMING_TIME: hit.time,
            p.PARAM_USER_TIMING_LABEL: hit.label,
        },
    )


def build_exception_request(hit: ExceptionHit) -> HitRequest:
    """Build the parameters for an exception hit."""
    return HitRequest(
        required={p.PARAM_HIT_TYPE: p.HIT_TYPE_EXCEPTION},
        optional={
            p.PARAM_EXCEPTION_DESC: hit.description,
            p.PARAM_EXCEPTION_IS_FATAL: 1 if hit.is_fatal else 0,
        },
    )


_BUILDERS: dict[type, Callable[[Any], HitRequest]] = {
    EventHit: build_event_request,
    PageviewHit: build_pageview_request,
    TransactionHit: build_transaction_request,
    ItemHit: build_item_request,
    SocialHit: build_social_request,
    TimingHit: build_timing_request,
    UserTimingHit: build_user_timing_request,
    ExceptionHit: build_exception_request,
}


def build_hit_request(hit: Any) -> HitRequest:
    """Build the parameters for any supported hit.

    Raises:
        TypeError: If the object is not one of the hit types.
        MissingArgumentError: If a mandatory field is None.
    """
    builder = _BUILDERS.get(type(hit))
    if builder is None:
        raise TypeError(f"Unsupported hit type: {type(hit).__name__}")
    return builder(hit)
