"""Abstract interfaces for the FINDOLOGIC API client."""

from .http_client import IHttpClient, IHttpResponse

__all__ = [
    "IHttpClient",
    "IHttpResponse",
]
