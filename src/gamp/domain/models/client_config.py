"""Client configuration domain model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

HttpMethod = Literal["GET", "POST"]


class ClientConfig(BaseModel):
    """Resolved tracking identity and transport options for one client instance."""

    model_config = ConfigDict(frozen=True)

    tracking_id: str
    client_id: str
    http_method: HttpMethod = "POST"
    use_cache_buster: bool = False
    anonymize_ip: bool = False
