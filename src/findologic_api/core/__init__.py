"""Core domain layer - enums, exceptions, interfaces and schemas."""

from .enums import ConfigKey, Endpoint, OrderType, QueryParameter
from .exceptions import (
    ConfigError,
    FindologicApiError,
    MissingParameterError,
    ResponseParseError,
    ServiceNotAliveError,
    UnknownConfigKeyError,
    UnknownParamError,
)

__all__ = [
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
]
