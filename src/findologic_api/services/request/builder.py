"""Outbound request construction."""

from dataclasses import dataclass, field
from typing import Any

from ...core.enums import Endpoint, QueryParameter


@dataclass(frozen=True)
class PreparedRequest:
    """Fully formed GET request, ready to hand to the HTTP client."""

    endpoint: Endpoint
    url: str
    timeout: float
    params: list[tuple[str, str]] = field(default_factory=list)
    method: str = "GET"


def flatten_params(name: str, value: Any) -> list[tuple[str, str]]:
    """Flatten a parameter into PHP style bracketed query pairs.

    Lists become ``name[]`` entries and mappings become ``name[key]``
    entries. A mapping key of ``""`` appends to the parent name, so
    ``{"cat": {"": ["Buch"], "min": 5}}`` under ``attrib`` yields
    ``attrib[cat][]=Buch`` and ``attrib[cat][min]=5``.
    """
    if isinstance(value, dict):
        pairs: list[tuple[str, str]] = []
        for key, sub_value in value.items():
            sub_name = name if key == "" else f"{name}[{key}]"
            pairs.extend(flatten_params(sub_name, sub_value))
        return pairs
    if isinstance(value, (list, tuple)):
        pairs = []
        for item in value:
            pairs.extend(flatten_params(f"{name}[]", item))
        return pairs
    if isinstance(value, bool):
        return [(name, "1" if value else "0")]
    return [(name, str(value))]


class RequestBuilder:
    """Turns an endpoint plus the current parameters into a PreparedRequest."""

    def __init__(
        self,
        api_url: str,
        shopkey: str,
        request_timeout: float,
        alivetest_timeout: float,
    ):
        self._api_url = api_url
        self._shopkey = shopkey
        self._request_timeout = request_timeout
        self._alivetest_timeout = alivetest_timeout

    def build(self, endpoint: Endpoint, params: dict[str, Any]) -> PreparedRequest:
        """
        Build the request for an endpoint.

        Args:
            endpoint: Target endpoint
            params: Currently set parameters in insertion order

        Returns:
            PreparedRequest; the alivetest only carries the shopkey
        """
        query: list[tuple[str, str]] = [
            (QueryParameter.SERVICE_ID.value, self._shopkey)
        ]
        if endpoint is Endpoint.ALIVETEST:
            timeout = self._alivetest_timeout
        else:
            timeout = self._request_timeout
            for name, value in params.items():
                query.extend(flatten_params(name, value))

        return PreparedRequest(
            endpoint=endpoint,
            url=self._format_url(endpoint, params),
            timeout=timeout,
            params=query,
        )

    def _format_url(self, endpoint: Endpoint, params: dict[str, Any]) -> str:
        return self._api_url.format(
            shopkey=self._shopkey,
            shopurl=params.get(QueryParameter.SHOP_URL.value, ""),
            endpoint=endpoint.value,
        )
