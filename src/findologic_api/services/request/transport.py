"""Issues prepared requests and translates transport failures."""

import httpx

from ...core.exceptions import ServiceNotAliveError
from ...core.interfaces.http_client import IHttpClient, IHttpResponse
from ...observability.logger import get_logger
from .builder import PreparedRequest

logger = get_logger(__name__)


def send_prepared(http_client: IHttpClient, request: PreparedRequest) -> IHttpResponse:
    """
    Send a prepared request through the HTTP client.

    Raises:
        ServiceNotAliveError: Wrapping the error text of any transport failure
    """
    logger.debug(
        "Sending request",
        endpoint=request.endpoint.value,
        url=request.url,
        timeout=request.timeout,
    )
    try:
        return http_client.request(
            request.method,
            request.url,
            params=request.params,
            timeout=request.timeout,
        )
    except (httpx.RequestError, OSError) as e:
        logger.warning(
            "Transport error",
            endpoint=request.endpoint.value,
            error=str(e),
        )
        raise ServiceNotAliveError(str(e)) from e
