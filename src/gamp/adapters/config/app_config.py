"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gamp.adapters.http.constants import COLLECT_URL, SUPPORTED_HTTP_METHODS


class AppConfig(BaseSettings):
    """Client configuration following 12-factor principles.

    Every field can be set through a GAMP_-prefixed environment variable
    (e.g. GAMP_TRACKING_ID) or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="GAMP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Identity
    tracking_id: str | None = Field(
        default=None, description="Analytics property tracking ID (UA-XXXX-Y)"
    )
    client_id: str | None = Field(
        default=None,
        description="Visitor client ID; resolved from the _ga cookie or generated when unset",
    )

    # Transport
    http_method: str = Field(default="POST", description="HTTP method: 'GET' or 'POST'")
    use_cache_buster: bool = Field(
        default=False, description="Append a random 'z' parameter to GET requests"
    )
    endpoint_url: str = Field(default=COLLECT_URL, description="Collection endpoint URL")
    timeout_seconds: float | None = Field(
        default=None,
        description="Timeout for hit requests in seconds (unset means no timeout)",
    )
    user_agent: str | None = Field(
        default=None,
        description="User agent sent when the calling environment does not provide one",
    )

    # Privacy
    anonymize_ip: bool = Field(default=False, description="Send aip=1 with every hit")

    @field_validator("http_method")
    @classmethod
    def validate_http_method(cls, v: str) -> str:
        """Validate HTTP method is either 'GET' or 'POST'."""
        method = v.upper()
        if method not in SUPPORTED_HTTP_METHODS:
            raise ValueError("http_method must be either 'GET' or 'POST'")
        return method
