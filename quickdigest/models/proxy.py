"""
Pydantic model for CORS relay configuration.
"""
from pydantic import BaseModel, ConfigDict

from quickdigest.models.enums import RelayMode


class RelayProxy(BaseModel):
    """A public relay that fetches a target URL on our behalf."""

    name: str
    base_url: str
    mode: RelayMode
    query_param: str = "url"

    model_config = ConfigDict(frozen=True)
