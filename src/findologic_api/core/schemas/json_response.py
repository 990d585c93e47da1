"""Suggestion response schemas (JSON payloads)."""

from typing import Optional

from .xml_response import FrozenModel


class Suggestion(FrozenModel):
    """Single autocomplete candidate."""

    label: str = ""
    block: str = ""
    frequency: str = ""
    image_url: Optional[str] = None
    price: Optional[float] = None
    identifier: Optional[str] = None
    base_price: Optional[float] = None
    base_price_unit: Optional[str] = None
    url: Optional[str] = None
    ordernumber: Optional[str] = None

class JsonResponse(FrozenModel):
    """Typed suggestion response."""

    suggestions: tuple[Suggestion, ...] = ()
