"""Custom exceptions for the FINDOLOGIC API client."""


class FindologicApiError(Exception):
    """Base exception for all FINDOLOGIC API client errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(FindologicApiError):
    """Client configuration failed validation."""

    def __init__(self, invalid_keys: list[str] | None = None):
        super().__init__(
            "Invalid FindologicApi config.",
            {"invalid_keys": invalid_keys or []},
        )
        self.invalid_keys = invalid_keys or []


class MissingParameterError(FindologicApiError):
    """A required request parameter was not set."""

    def __init__(self, param: str):
        super().__init__(f"Required param {param} is not set.")
        self.param = param


class ServiceNotAliveError(FindologicApiError):
    """The service is unreachable or answered unexpectedly."""

    def __init__(self, reason: str, status_code: int | None = None):
        super().__init__(
            f"The service is not alive. Reason: {reason}",
            {"status_code": status_code} if status_code is not None else None,
        )
        self.reason = reason
        self.status_code = status_code


class UnknownParamError(FindologicApiError, LookupError):
    """Requested parameter is unknown or has not been set."""

    def __init__(self, param: str):
        super().__init__("Unknown or unset param.", {"param": param})
        self.param = param


class UnknownConfigKeyError(FindologicApiError, LookupError):
    """Requested configuration key is unknown."""

    def __init__(self, key: str):
        super().__init__("Unknown or unset configuration value.", {"key": key})
        self.key = key


class ResponseParseError(FindologicApiError):
    """Response payload could not be decoded."""

    pass
