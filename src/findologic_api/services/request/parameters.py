"""Per-request parameter store."""

import copy
from typing import Any

from ...core.enums import REQUIRED_PARAMS, QueryParameter
from ...core.exceptions import MissingParameterError, UnknownParamError
from ...validators.config_validator import normalize_key

_KNOWN_PARAMS = frozenset(QueryParameter.list())


class ParameterStore:
    """Holds the query parameters of the next request.

    Keeps insertion order, which is the order parameters are sent in.
    The service identifier is owned by the client configuration and is not
    stored here.
    """

    def __init__(self):
        self._params: dict[str, Any] = {}

    def set(self, name: str | QueryParameter, value: Any) -> None:
        """
        Set a parameter, replacing any previous value.

        Args:
            name: Parameter name from the QueryParameter vocabulary
            value: Scalar, list or mapping value

        Raises:
            UnknownParamError: If the name is not part of the vocabulary
        """
        key = self._check(name)
        self._params[key] = copy.deepcopy(value)

    def add(self, name: str | QueryParameter, value: Any) -> None:
        """Append a value to a list-valued parameter."""
        key = self._check(name)
        current = self._params.get(key, [])
        if not isinstance(current, list):
            current = [current]
        self._params[key] = [*current, copy.deepcopy(value)]

    def get(self, name: str | QueryParameter) -> Any:
        """
        Get a parameter value.

        Raises:
            UnknownParamError: If the parameter is unknown or unset
        """
        key = normalize_key(name)
        if key not in self._params:
            raise UnknownParamError(str(key))
        return copy.deepcopy(self._params[key])

    def get_all(self) -> dict[str, Any]:
        """Get a deep copy of all set parameters in insertion order."""
        return copy.deepcopy(self._params)

    def unset(self, name: str | QueryParameter) -> None:
        """Remove a parameter if it is set."""
        self._params.pop(normalize_key(name), None)

    def is_set(self, name: str | QueryParameter) -> bool:
        return normalize_key(name) in self._params

    def validate_required(self) -> None:
        """
        Ensure every required parameter is set.

        Raises:
            MissingParameterError: For the first missing required parameter
        """
        for param in REQUIRED_PARAMS:
            if param.value not in self._params:
                raise MissingParameterError(param.value)

    def _check(self, name: str | QueryParameter) -> str:
        key = normalize_key(name)
        if key not in _KNOWN_PARAMS or key == QueryParameter.SERVICE_ID.value:
            raise UnknownParamError(str(key))
        return key
