"""FINDOLOGIC API client: configuration, parameters and request dispatch."""

import time
from collections.abc import Mapping
from typing import Any, Optional, Union

from .config import Settings
from .core.enums import ConfigKey, Endpoint, OrderType, QueryParameter
from .core.exceptions import ServiceNotAliveError, UnknownConfigKeyError
from .core.interfaces.http_client import IHttpClient
from .core.schemas.json_response import JsonResponse
from .core.schemas.xml_response import XmlResponse
from .observability.logger import get_logger
from .services.request.alivetest import AlivetestProber
from .services.request.builder import RequestBuilder
from .services.request.parameters import ParameterStore
from .services.request.transport import send_prepared
from .services.response.json_parser import parse_json_response
from .services.response.xml_parser import parse_xml_response
from .validators.config_validator import ConfigValidator, normalize_key

logger = get_logger(__name__)

Response = Union[XmlResponse, JsonResponse]


class FindologicApi:
    """Client for the search, navigation and suggestion endpoints.

    Usage::

        api = FindologicApi({FindologicApi.SHOPKEY: "80AB18D4BE2654A78244106AD315DC2C"})
        result = (
            api.set_shopurl("www.example.com")
            .set_userip("127.0.0.1")
            .set_referer("www.example.com/sale")
            .set_revision("1.0.0")
            .set_query("shoes")
            .send_search_request()
        )

    Every request type except suggestions runs an alivetest first. Requests
    are sequential and blocking; nothing is retried automatically.
    """

    SHOPKEY = ConfigKey.SHOPKEY.value
    HTTP_CLIENT = ConfigKey.HTTP_CLIENT.value
    API_URL = ConfigKey.API_URL.value
    REQUEST_TIMEOUT = ConfigKey.REQUEST_TIMEOUT.value
    ALIVETEST_TIMEOUT = ConfigKey.ALIVETEST_TIMEOUT.value

    def __init__(
        self,
        config: Mapping[Any, Any],
        settings: Optional[Settings] = None,
    ):
        """
        Validate the configuration and set up the request pipeline.

        Args:
            config: Mapping of ConfigKey names to values; ``shopkey`` is required
            settings: Defaults for keys missing from ``config``

        Raises:
            ConfigError: If the configuration is invalid
        """
        self._owns_http_client = not any(
            normalize_key(key) == self.HTTP_CLIENT for key in config
        )
        self._config = ConfigValidator(settings).validate(config)
        self._http_client: IHttpClient = self._config[self.HTTP_CLIENT]

        self._params = ParameterStore()
        self._builder = RequestBuilder(
            api_url=self._config[self.API_URL],
            shopkey=self._config[self.SHOPKEY],
            request_timeout=self._config[self.REQUEST_TIMEOUT],
            alivetest_timeout=self._config[self.ALIVETEST_TIMEOUT],
        )
        self._prober = AlivetestProber(self._http_client, self._builder)
        self._response_time: Optional[float] = None

    # --- Configuration ---

    def get_config_by_key(self, key: str | ConfigKey) -> Any:
        """
        Get a validated configuration value.

        Raises:
            UnknownConfigKeyError: If the key is not a configuration key
        """
        name = normalize_key(key)
        if name not in self._config:
            raise UnknownConfigKeyError(str(name))
        return self._config[name]

    # --- Parameters ---

    def get_param(self, name: str | QueryParameter) -> Any:
        """Get a set parameter; raises UnknownParamError if unset."""
        return self._params.get(name)

    def get_all_params(self) -> dict[str, Any]:
        """Get all set parameters in insertion order."""
        return self._params.get_all()

    def set_param(self, name: str | QueryParameter, value: Any) -> "FindologicApi":
        self._params.set(name, value)
        return self

    def unset_param(self, name: str | QueryParameter) -> "FindologicApi":
        self._params.unset(name)
        return self

    def set_shopurl(self, shopurl: str) -> "FindologicApi":
        return self.set_param(QueryParameter.SHOP_URL, shopurl)

    def set_userip(self, userip: str) -> "FindologicApi":
        return self.set_param(QueryParameter.USER_IP, userip)

    def set_referer(self, referer: str) -> "FindologicApi":
        return self.set_param(QueryParameter.REFERER, referer)

    def set_revision(self, revision: str) -> "FindologicApi":
        return self.set_param(QueryParameter.REVISION, revision)

    def set_query(self, query: str) -> "FindologicApi":
        return self.set_param(QueryParameter.QUERY, query)

    def set_order(self, order: OrderType | str) -> "FindologicApi":
        value = order.value if isinstance(order, OrderType) else order
        return self.set_param(QueryParameter.ORDER, value)

    def set_count(self, count: int) -> "FindologicApi":
        """Number of products to return."""
        return self.set_param(QueryParameter.COUNT, count)

    def set_first(self, first: int) -> "FindologicApi":
        """Offset of the first product to return."""
        return self.set_param(QueryParameter.FIRST, first)

    def set_identifier(self, identifier: str) -> "FindologicApi":
        return self.set_param(QueryParameter.IDENTIFIER, identifier)

    def set_force_original_query(self, force: bool = True) -> "FindologicApi":
        if not force:
            return self.unset_param(QueryParameter.FORCE_ORIGINAL_QUERY)
        return self.set_param(QueryParameter.FORCE_ORIGINAL_QUERY, True)

    def add_group(self, group: str) -> "FindologicApi":
        self._params.add(QueryParameter.GROUP, group)
        return self

    def add_properties(self, name: str) -> "FindologicApi":
        """Request an additional product property in the response."""
        self._params.add(QueryParameter.PROPERTIES, name)
        return self

    def add_output_attrib(self, name: str) -> "FindologicApi":
        self._params.add(QueryParameter.OUTPUT_ATTRIB, name)
        return self

    def add_attribute(
        self,
        filter_name: str,
        value: Any,
        special: Optional[str] = None,
    ) -> "FindologicApi":
        """
        Filter the result by a filter value.

        Args:
            filter_name: Filter name, e.g. ``cat`` or ``price``
            value: Filter value
            special: Optional sub key such as ``min`` or ``max`` for ranges
        """
        attrib = self._nested_param(QueryParameter.ATTRIB)
        entry = dict(attrib.get(filter_name, {}))
        if special:
            entry[special] = value
        else:
            entry[""] = [*entry.get("", []), value]
        attrib[filter_name] = entry
        return self.set_param(QueryParameter.ATTRIB, attrib)

    def add_push_attrib(
        self, key: str, value: str, factor: float
    ) -> "FindologicApi":
        """Boost products whose attribute ``key`` has ``value`` by ``factor``."""
        push = self._nested_param(QueryParameter.PUSH_ATTRIB)
        push[key] = {**push.get(key, {}), value: factor}
        return self.set_param(QueryParameter.PUSH_ATTRIB, push)

    def add_selected(self, filter_name: str, value: str) -> "FindologicApi":
        """Mark a filter value as selected (navigation requests)."""
        selected = self._nested_param(QueryParameter.SELECTED)
        selected[filter_name] = [*selected.get(filter_name, []), value]
        return self.set_param(QueryParameter.SELECTED, selected)

    def _nested_param(self, name: QueryParameter) -> dict[str, Any]:
        if not self._params.is_set(name):
            return {}
        return dict(self._params.get(name))

    # --- Requests ---

    def send(self, endpoint: Endpoint) -> Optional[Response]:
        """
        Send a request to an endpoint.

        Args:
            endpoint: Target endpoint

        Returns:
            XmlResponse for search and navigation, JsonResponse for
            suggestions, None for the alivetest

        Raises:
            MissingParameterError: If a required parameter is not set
            ServiceNotAliveError: If the alivetest or the request fails
            ResponseParseError: If the response payload is malformed
        """
        self._response_time = None
        params = self._params.get_all()

        if endpoint is Endpoint.ALIVETEST:
            self._prober.check(params)
            return None

        self._params.validate_required()

        if endpoint.requires_alivetest:
            self._prober.check(params)

        request = self._builder.build(endpoint, params)
        logger.info(
            "Dispatching request",
            endpoint=endpoint.value,
            param_count=len(request.params),
        )

        started = time.perf_counter()
        try:
            response = send_prepared(self._http_client, request)
        finally:
            self._response_time = time.perf_counter() - started

        if response.status_code != 200:
            logger.warning(
                "Request returned unexpected status",
                endpoint=endpoint.value,
                status_code=response.status_code,
            )
            raise ServiceNotAliveError(
                f"Unexpected status code {response.status_code}.",
                response.status_code,
            )

        logger.info(
            "Request completed",
            endpoint=endpoint.value,
            response_time=round(self._response_time, 4),
        )

        if endpoint is Endpoint.SUGGESTION:
            return parse_json_response(response.text)
        # Raw bytes, so the XML encoding declaration decides the charset
        return parse_xml_response(response.content)

    def send_search_request(self) -> XmlResponse:
        return self.send(Endpoint.SEARCH)

    def send_navigation_request(self) -> XmlResponse:
        return self.send(Endpoint.NAVIGATION)

    def send_suggestion_request(self) -> JsonResponse:
        return self.send(Endpoint.SUGGESTION)

    def send_alivetest(self) -> None:
        """Run only the alivetest; raises ServiceNotAliveError on failure."""
        self.send(Endpoint.ALIVETEST)

    def get_response_time(self) -> Optional[float]:
        """Duration in seconds of the last main request.

        None before the first send and after a send that failed before the
        main request was dispatched.
        """
        return self._response_time

    # --- Lifecycle ---

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "FindologicApi":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
