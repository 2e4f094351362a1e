"""Client facade wiring identity resolution, the send pipeline and the HTTP transport."""

import logging
from collections.abc import Mapping

from gamp.adapters.config import AppConfig
from gamp.adapters.http import COLLECT_URL, RequestsHitTransport
from gamp.adapters.http.constants import SUPPORTED_HTTP_METHODS
from gamp.application.identity import resolve_client_id, validate_tracking_id
from gamp.application.services import HitService
from gamp.domain import parameters as p
from gamp.domain.models import (
    ClientConfig,
    EventHit,
    ExceptionHit,
    Hit,
    HttpMethod,
    ItemHit,
    PageviewHit,
    ParamValue,
    RequestContext,
    SessionParameters,
    SocialHit,
    TimingHit,
    TransactionHit,
    UserTimingHit,
)
from gamp.domain.ports import HitTransport

logger = logging.getLogger(__name__)


def _normalize_http_method(http_method: str | None) -> HttpMethod:
    """Return "GET" or "POST"; anything else falls back to POST."""
    method = (http_method or "POST").upper()
    if method not in SUPPORTED_HTTP_METHODS:
        logger.warning(f"Unsupported HTTP method {http_method!r}, falling back to POST")
        return "POST"
    return "GET" if method == "GET" else "POST"


class GampClient:
    """Send Measurement Protocol hits for one visitor of one analytics property.

    Usage:
        client = GampClient("UA-12345-1", client_id=request.cookies.get("_ga"))
        client.set_dimensions({"cd1": "premium"})
        client.send_event(category="checkout", action="complete", value=42)

    Each ``send_*`` call performs one blocking HTTP request and returns the raw
    response body. Values queued with the ``set_*`` methods go out with the
    next hit only.

    Not thread-safe; use one client per thread.
    """

    def __init__(
        self,
        tracking_id: str,
        client_id: str | None = None,
        http_method: str = "POST",
        use_cache_buster: bool = False,
        anonymize_ip: bool = False,
        request_context: RequestContext | None = None,
        transport: HitTransport | None = None,
        endpoint_url: str = COLLECT_URL,
        timeout: float | None = None,
        default_user_agent: str | None = None,
    ) -> None:
        """Create a client.

        Args:
            tracking_id: Analytics property ID, e.g. "UA-12345-1".
            client_id: Optional visitor ID (cookie-style or UUID v4).
            http_method: "GET" or "POST" (default). Other values fall back to POST.
            use_cache_buster: Add a random "z" parameter to GET requests.
            anonymize_ip: Send aip=1 with every hit.
            request_context: Inbound request details (user agent, _ga cookie).
            transport: Hit transport; a RequestsHitTransport is created when omitted.
            endpoint_url: Collection endpoint for the default transport.
            timeout: Request timeout in seconds for the default transport.
            default_user_agent: User agent the default transport sends when the
                request context has none.

        Raises:
            ConfigurationError: If the tracking ID is malformed.
        """
        context = request_context or RequestContext()
        method = _normalize_http_method(http_method)

        self._config = ClientConfig(
            tracking_id=validate_tracking_id(tracking_id),
            client_id=resolve_client_id(client_id, context.ga_cookie),
            http_method=method,
            use_cache_buster=use_cache_buster,
            anonymize_ip=anonymize_ip,
        )
        # Only a transport built here is closed by close()
        self._owns_transport = transport is None
        self._transport = transport or RequestsHitTransport(
            http_method=method,
            use_cache_buster=use_cache_buster,
            endpoint_url=endpoint_url,
            timeout=timeout,
            default_user_agent=default_user_agent,
        )
        self._service = HitService(
            self._config,
            self._transport,
            SessionParameters(),
            user_agent=context.user_agent,
        )

    @classmethod
    def from_config(
        cls,
        config: AppConfig | None = None,
        request_context: RequestContext | None = None,
        transport: HitTransport | None = None,
    ) -> "GampClient":
        """Create a client from application settings (environment / .env by default)."""
        config = config or AppConfig()
        return cls(
            tracking_id=config.tracking_id or "",
            client_id=config.client_id,
            http_method=config.http_method,
            use_cache_buster=config.use_cache_buster,
            anonymize_ip=config.anonymize_ip,
            request_context=request_context,
            transport=transport,
            endpoint_url=config.endpoint_url,
            timeout=config.timeout_seconds,
            default_user_agent=config.user_agent,
        )

    def close(self) -> None:
        """Release the HTTP session of the transport this client created.

        A transport passed in by the caller is left open.
        """
        if self._owns_transport and isinstance(self._transport, RequestsHitTransport):
            self._transport.close()

    def __enter__(self) -> "GampClient":
        return self

    def __exit__(self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def tracking_id(self) -> str:
        return self._config.tracking_id

    @property
    def client_id(self) -> str:
        return self._config.client_id

    @property
    def session_parameters(self) -> SessionParameters:
        return self._service.session_parameters

    # Hits

    def send_hit(self, hit: Hit) -> str:
        """Send any typed hit."""
        return self._service.send_hit(hit)

    def send_event(
        self,
        category: str,
        action: str,
        label: str | None = None,
        value: int | None = None,
    ) -> str:
        """Send an event."""
        return self.send_hit(EventHit(category=category, action=action, label=label, value=value))

    def send_pageview(
        self,
        path: str | None = None,
        title: str | None = None,
        host: str | None = None,
        location: str | None = None,
        description: str | None = None,
    ) -> str:
        """Send a page view."""
        return self.send_hit(
            PageviewHit(
                path=path, title=title, host=host, location=location, description=description
            )
        )

    def send_transaction(
        self,
        transaction_id: str,
        affiliation: str | None = None,
        revenue: float | None = None,
        shipping_cost: float | None = None,
        tax: float | None = None,
        currency_code: str | None = None,
    ) -> str:
        """Send an e-commerce transaction."""
        return self.send_hit(
            TransactionHit(
                transaction_id=transaction_id,
                affiliation=affiliation,
                revenue=revenue,
                shipping_cost=shipping_cost,
                tax=tax,
                currency_code=currency_code,
            )
        )

    def send_item(
        self,
        transaction_id: str,
        item_name: str,
        price: float | None = None,
        quantity: int | None = None,
        code: str | None = None,
        category: str | None = None,
        currency_code: str | None = None,
    ) -> str:
        """Send an e-commerce item."""
        return self.send_hit(
            ItemHit(
                transaction_id=transaction_id,
                item_name=item_name,
                price=price,
                quantity=quantity,
                code=code,
                category=category,
                currency_code=currency_code,
            )
        )

    def send_social_action(self, social_network: str, action: str, target: str) -> str:
        """Send a social interaction."""
        return self.send_hit(SocialHit(social_network=social_network, action=action, target=target))

    def send_timing_data(
        self,
        page_load_time: int | None = None,
        dns_time: int | None = None,
        page_download_time: int | None = None,
        redirect_response_time: int | None = None,
        tcp_connect_time: int | None = None,
        server_response_time: int | None = None,
    ) -> str:
        """Send page timing data (milliseconds)."""
        return self.send_hit(
            TimingHit(
                page_load_time=page_load_time,
                dns_time=dns_time,
                page_download_time=page_download_time,
                redirect_response_time=redirect_response_time,
                tcp_connect_time=tcp_connect_time,
                server_response_time=server_response_time,
            )
        )

    def send_user_timing_data(
        self,
        category: str | None = None,
        variable: str | None = None,
        time: int | None = None,
        label: str | None = None,
    ) -> str:
        """Send a user timing (milliseconds)."""
        return self.send_hit(
            UserTimingHit(category=category, variable=variable, time=time, label=label)
        )

    def send_exception(self, description: str | None = None, is_fatal: bool = False) -> str:
        """Send an exception report."""
        return self.send_hit(ExceptionHit(description=description, is_fatal=is_fatal))

    # Parameters for the next hit

    def set_dimensions(self, dimensions: Mapping[str, ParamValue]) -> None:
        """Queue custom dimensions (keys cd1, cd2, ...) for the next hit."""
        self.session_parameters.set_dimensions(dimensions)

    def set_metrics(self, metrics: Mapping[str, ParamValue]) -> None:
        """Queue custom metrics (keys cm1, cm2, ...) for the next hit."""
        self.session_parameters.set_metrics(metrics)

    def set_traffic_source(
        self,
        referrer: str | None = None,
        campaign_name: str | None = None,
        campaign_source: str | None = None,
        campaign_medium: str | None = None,
        campaign_keyword: str | None = None,
        campaign_content: str | None = None,
        campaign_id: str | None = None,
        adwords_id: str | None = None,
        display_ads_id: str | None = None,
    ) -> None:
        """Queue referrer and campaign information for the next hit."""
        self.session_parameters.update(
            {
                p.PARAM_DOCUMENT_REFERRER: referrer,
                p.PARAM_CAMPAIGN_NAME: campaign_name,
                p.PARAM_CAMPAIGN_SOURCE: campaign_source,
                p.PARAM_CAMPAIGN_MEDIUM: campaign_medium,
                p.PARAM_CAMPAIGN_KEYWORD: campaign_keyword,
                p.PARAM_CAMPAIGN_CONTENT: campaign_content,
                p.PARAM_CAMPAIGN_ID: campaign_id,
                p.PARAM_GOOGLE_ADWORDS_ID: adwords_id,
                p.PARAM_GOOGLE_DISPLAYADS_ID: display_ads_id,
            }
        )

    def set_app_info(self, name: str | None = None, version: str | None = None) -> None:
        """Queue application name and version for the next hit."""
        self.session_parameters.update({p.PARAM_APP_NAME: name, p.PARAM_APP_VERSION: version})

    def set_system_info(
        self,
        screen_resolution: str | None = None,
        viewport_size: str | None = None,
        document_encoding: str | None = None,
        screen_colors: str | None = None,
        user_language: str | None = None,
        java_enabled: bool | None = None,
        flash_version: str | None = None,
    ) -> None:
        """Queue browser/system information for the next hit."""
        self.session_parameters.update(
            {
                p.PARAM_SCREEN_RESOLUTION: screen_resolution,
                p.PARAM_VIEWPORT_SIZE: viewport_size,
                p.PARAM_DOCUMENT_ENCODING: document_encoding,
                p.PARAM_SCREEN_COLORS: screen_colors,
                p.PARAM_USER_LANGUAGE: user_language,
                p.PARAM_JAVA_ENABLED: java_enabled,
                p.PARAM_FLASH_VERSION: flash_version,
            }
        )

    def set_non_interactive(self, non_interactive: bool = True) -> None:
        """Mark the next hit as non-interactive (it will not affect bounce rate)."""
        self.session_parameters.update({p.PARAM_NON_INTERACTIVE_HIT: non_interactive})
