"""Request context domain model."""

from pydantic import BaseModel, ConfigDict


class RequestContext(BaseModel):
    """Details of the inbound request a hit is being reported for.

    Both fields are optional; server-side jobs usually have neither.
    """

    model_config = ConfigDict(frozen=True)

    user_agent: str | None = None
    ga_cookie: str | None = None  # Raw value of the "_ga" cookie, e.g. "GA1.2.111111111.222222222"
