"""Client SDK for the FINDOLOGIC search, navigation and suggestion service."""

from .client import FindologicApi
from .core.enums import ConfigKey, Endpoint, OrderType, QueryParameter
from .core.exceptions import (
    ConfigError,
    FindologicApiError,
    MissingParameterError,
    ResponseParseError,
    ServiceNotAliveError,
    UnknownConfigKeyError,
    UnknownParamError,
)
from .core.schemas import JsonResponse, XmlResponse

__all__ = [
    "FindologicApi",
    "ConfigKey",
    "Endpoint",
    "OrderType",
    "QueryParameter",
    "FindologicApiError",
    "ConfigError",
    "MissingParameterError",
    "ResponseParseError",
    "ServiceNotAliveError",
    "UnknownConfigKeyError",
    "UnknownParamError",
    "JsonResponse",
    "XmlResponse",
]
