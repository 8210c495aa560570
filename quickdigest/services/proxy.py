from typing import List
from urllib.parse import quote, urlencode

from quickdigest.models.enums import RelayMode
from quickdigest.models.proxy import RelayProxy

# Public relays tried after the direct call, in this order
DEFAULT_RELAYS: List[RelayProxy] = [
    RelayProxy(
        name="codetabs",
        base_url="https://api.codetabs.com/v1/proxy",
        mode=RelayMode.QUERY,
        query_param="quest",
    ),
    RelayProxy(
        name="cors-anywhere",
        base_url="https://cors-anywhere.herokuapp.com/",
        mode=RelayMode.PATH,
    ),
]


class ProxyService:
    @staticmethod
    def build_relay_url(relay: RelayProxy, target_url: str) -> str:
        """
        Wrap a target URL so that it is fetched through the given relay.

        QUERY relays receive the fully URL-encoded target in their query
        parameter; PATH relays get the target appended verbatim.
        """
        if relay.mode == RelayMode.QUERY:
            query = urlencode({relay.query_param: target_url}, quote_via=quote, safe="")
            return f"{relay.base_url}?{query}"
        return f"{relay.base_url.rstrip('/')}/{target_url}"
