"""Liveness probe run ahead of search and navigation requests."""

from typing import Any

from ...core.enums import Endpoint
from ...core.exceptions import ServiceNotAliveError
from ...core.interfaces.http_client import IHttpClient
from ...observability.logger import get_logger
from .builder import RequestBuilder
from .transport import send_prepared

logger = get_logger(__name__)

ALIVE_BODY = "alive"


class AlivetestProber:
    """Confirms the service answers ``alive`` with HTTP 200."""

    def __init__(self, http_client: IHttpClient, builder: RequestBuilder):
        self._http_client = http_client
        self._builder = builder

    def check(self, params: dict[str, Any]) -> None:
        """
        Run the alivetest.

        Args:
            params: Current request parameters, used only for URL formatting

        Raises:
            ServiceNotAliveError: On transport failure, a body other than
                ``alive``, or an unexpected status code
        """
        request = self._builder.build(Endpoint.ALIVETEST, params)
        response = send_prepared(self._http_client, request)

        body = response.text
        if body != ALIVE_BODY:
            logger.warning(
                "Alivetest returned unexpected body",
                status_code=response.status_code,
                body_preview=body[:100],
            )
            raise ServiceNotAliveError(body, response.status_code)

        if response.status_code != 200:
            logger.warning(
                "Alivetest returned unexpected status",
                status_code=response.status_code,
            )
            raise ServiceNotAliveError(
                f"Unexpected status code {response.status_code}.",
                response.status_code,
            )

        logger.debug("Alivetest passed")
