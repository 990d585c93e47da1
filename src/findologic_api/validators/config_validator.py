"""Configuration validator: a static table of per-key predicates."""

import re
import string
from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Optional

import httpx

from ..config import Settings, get_settings
from ..core.enums import ConfigKey
from ..core.exceptions import ConfigError
from ..observability.logger import get_logger

logger = get_logger(__name__)

SHOPKEY_PATTERN = re.compile(r"^[A-F0-9]{32}$")
URL_TEMPLATE_FIELDS = frozenset({"shopkey", "shopurl", "endpoint"})


def _is_shopkey(value: Any) -> bool:
    return isinstance(value, str) and SHOPKEY_PATTERN.fullmatch(value) is not None


def _is_http_client(value: Any) -> bool:
    return callable(getattr(value, "request", None))


def _is_url_template(value: Any) -> bool:
    """Only plain {shopkey}, {shopurl} and {endpoint} fields are allowed."""
    if not isinstance(value, str):
        return False
    try:
        fields = [field for _, field, _, _ in string.Formatter().parse(value)]
        if not all(field is None or field in URL_TEMPLATE_FIELDS for field in fields):
            return False
        value.format(shopkey="", shopurl="", endpoint="")
    except (KeyError, ValueError):
        return False
    return True


def _is_timeout(value: Any) -> bool:
    # bool is an int subclass but never a sensible timeout
    return isinstance(value, (int, float)) and not isinstance(value, bool)


RULES: dict[str, Callable[[Any], bool]] = {
    ConfigKey.SHOPKEY.value: _is_shopkey,
    ConfigKey.HTTP_CLIENT.value: _is_http_client,
    ConfigKey.API_URL.value: _is_url_template,
    ConfigKey.REQUEST_TIMEOUT.value: _is_timeout,
    ConfigKey.ALIVETEST_TIMEOUT.value: _is_timeout,
}

REQUIRED_KEYS: tuple[str, ...] = (ConfigKey.SHOPKEY.value,)


def normalize_key(key: Any) -> Any:
    """Map enum members to their plain string value."""
    return key.value if isinstance(key, Enum) else key


class ConfigValidator:
    """Validates a client configuration mapping against ``RULES``.

    Unknown keys are ignored. Missing optional keys are filled from
    ``Settings``; a missing HTTP client is replaced by a fresh
    ``httpx.Client``.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    def validate(self, config: Mapping[Any, Any]) -> Mapping[str, Any]:
        """
        Validate a configuration and apply defaults.

        Args:
            config: Caller supplied configuration, left unmodified

        Returns:
            Read-only mapping containing every recognized key

        Raises:
            ConfigError: If a required key is missing or any key fails its rule
        """
        supplied = {normalize_key(key): value for key, value in config.items()}

        invalid = [key for key in REQUIRED_KEYS if key not in supplied]
        invalid.extend(
            key
            for key, rule in RULES.items()
            if key in supplied and not rule(supplied[key])
        )
        if invalid:
            logger.warning("Invalid client configuration", invalid_keys=invalid)
            raise ConfigError(invalid)

        validated: dict[str, Any] = {
            key: supplied[key] for key in RULES if key in supplied
        }
        validated.setdefault(ConfigKey.API_URL.value, self._settings.api_url)
        validated.setdefault(
            ConfigKey.REQUEST_TIMEOUT.value, self._settings.request_timeout
        )
        validated.setdefault(
            ConfigKey.ALIVETEST_TIMEOUT.value, self._settings.alivetest_timeout
        )
        if ConfigKey.HTTP_CLIENT.value not in validated:
            validated[ConfigKey.HTTP_CLIENT.value] = httpx.Client()

        return MappingProxyType(validated)
