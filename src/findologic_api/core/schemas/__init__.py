"""Response schemas."""

from .json_response import JsonResponse, Suggestion
from .xml_response import (
    Attributes,
    Filter,
    Item,
    LandingPage,
    Product,
    Promotion,
    Query,
    Range,
    Servers,
    XmlResponse,
)

__all__ = [
    "Attributes",
    "Filter",
    "Item",
    "JsonResponse",
    "LandingPage",
    "Product",
    "Promotion",
    "Query",
    "Range",
    "Servers",
    "Suggestion",
    "XmlResponse",
]
