"""Core enumerations for the FINDOLOGIC API client."""

from enum import Enum


class Endpoint(str, Enum):
    """Service endpoints, valued by their fixed path segment."""

    ALIVETEST = "alivetest.php"
    SEARCH = "index.php"
    NAVIGATION = "selector.php"
    SUGGESTION = "autocomplete.php"

    @classmethod
    def list(cls) -> list[str]:
        """Get all endpoint paths in declaration order."""
        return [member.value for member in cls]

    @property
    def requires_alivetest(self) -> bool:
        """Suggestions are latency sensitive and skip the alivetest."""
        return self not in (Endpoint.ALIVETEST, Endpoint.SUGGESTION)


class QueryParameter(str, Enum):
    """Query parameter names understood by the service."""

    SERVICE_ID = "shopkey"
    SHOP_URL = "shopurl"
    USER_IP = "userip"
    REFERER = "referer"
    REVISION = "revision"
    QUERY = "query"
    ATTRIB = "attrib"
    ORDER = "order"
    PROPERTIES = "properties"
    PUSH_ATTRIB = "pushAttrib"
    COUNT = "count"
    FIRST = "first"
    IDENTIFIER = "identifier"
    GROUP = "group"
    FORCE_ORIGINAL_QUERY = "forceOriginalQuery"
    OUTPUT_ATTRIB = "outputAttrib"
    SELECTED = "selected"

    @classmethod
    def list(cls) -> list[str]:
        """Get all parameter names in declaration order."""
        return [member.value for member in cls]


# Checked in this order; the first one missing is reported.
REQUIRED_PARAMS: tuple[QueryParameter, ...] = (
    QueryParameter.SHOP_URL,
    QueryParameter.USER_IP,
    QueryParameter.REFERER,
    QueryParameter.REVISION,
)


class OrderType(str, Enum):
    """Sort orders accepted by the ``order`` parameter."""

    RELEVANCE = "rank"
    DEFAULT = ""
    PRICE_ASC = "price ASC"
    PRICE_DESC = "price DESC"
    ALPHABETIC_ASC = "label ASC"
    ALPHABETIC_DESC = "label DESC"
    TOP_SELLERS_FIRST = "salesfrequency DESC"
    NEWEST_FIRST = "dateadded DESC"


class ConfigKey(str, Enum):
    """Recognized client configuration keys."""

    SHOPKEY = "shopkey"
    HTTP_CLIENT = "httpClient"
    API_URL = "apiUrl"
    REQUEST_TIMEOUT = "requestTimeout"
    ALIVETEST_TIMEOUT = "alivetestTimeout"
