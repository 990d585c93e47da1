"""HTTP client interface."""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class IHttpResponse(Protocol):
    """What the client reads from a response."""

    status_code: int
    text: str
    content: bytes


@runtime_checkable
class IHttpClient(Protocol):
    """Blocking HTTP client capability.

    ``httpx.Client`` satisfies this interface. Implementations raise
    ``httpx.RequestError`` or ``OSError`` on transport failures.
    """

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> IHttpResponse:
        """
        Send a request.

        Args:
            method: HTTP method
            url: Absolute request URL
            params: Query parameters
            timeout: Timeout in seconds

        Returns:
            Response exposing status_code, text and content
        """
        ...
