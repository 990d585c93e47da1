"""Request side: parameters, URL building and the alivetest."""

from .alivetest import AlivetestProber
from .builder import PreparedRequest, RequestBuilder, flatten_params
from .parameters import ParameterStore
from .transport import send_prepared

__all__ = [
    "AlivetestProber",
    "ParameterStore",
    "PreparedRequest",
    "RequestBuilder",
    "flatten_params",
    "send_prepared",
]
