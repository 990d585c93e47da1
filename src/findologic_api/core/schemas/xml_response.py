"""Search and navigation response schemas (XML payloads)."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class FrozenModel(BaseModel):
    """Read-only response model.

    Sequences are stored as tuples and mappings as read-only proxies, so
    nested collections cannot be changed after parsing either.
    """

    model_config = ConfigDict(frozen=True)


def _frozen_mapping_field() -> Any:
    return Field(default_factory=dict, validate_default=True)


class Servers(FrozenModel):
    """Servers that answered the request."""

    frontend: str = ""
    backend: str = ""


class Query(FrozenModel):
    """Echo of the executed query."""

    first: int = 0
    count: int = 0
    query_string: str = ""
    original_query: Optional[str] = None
    allow_override: bool = False
    did_you_mean_query: Optional[str] = None
    searched_word_count: int = 0
    found_word_count: int = 0


class LandingPage(FrozenModel):
    """Redirect target configured for the query."""

    link: str


class Promotion(FrozenModel):
    """Promotion banner configured for the query."""

    image: str = ""
    link: str = ""


class Product(FrozenModel):
    """Matching product reference."""

    id: str
    relevance: float = 0.0
    direct: bool = False
    properties: Mapping[str, str] = _frozen_mapping_field()

    @field_validator("properties")
    @classmethod
    def _freeze_properties(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("properties", mode="wrap")
    def _dump_properties(self, value: Mapping[str, str], handler: Any) -> Any:
        return handler(dict(value))


class Range(FrozenModel):
    """Numeric range of a range slider filter."""

    min: Optional[float] = None
    max: Optional[float] = None


class Attributes(FrozenModel):
    """Range slider attributes of a filter."""

    selected_range: Optional[Range] = None
    total_range: Optional[Range] = None
    step_size: Optional[float] = None
    unit: str = ""


class Item(FrozenModel):
    """Single selectable value of a filter. Items may nest (category trees)."""

    name: str = ""
    weight: Optional[float] = None
    frequency: Optional[int] = None
    image: Optional[str] = None
    color: Optional[str] = None
    selected: bool = False
    items: Mapping[str, "Item"] = _frozen_mapping_field()

    @field_validator("items")
    @classmethod
    def _freeze_items(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("items", mode="wrap")
    def _dump_items(self, value: Mapping[str, Any], handler: Any) -> Any:
        return handler(dict(value))


class Filter(FrozenModel):
    """Facet of a result, e.g. category or vendor."""

    name: str = ""
    display: str = ""
    select: str = ""
    selected_items: int = 0
    type: str = ""
    attributes: Optional[Attributes] = None
    items: Mapping[str, Item] = _frozen_mapping_field()
    item_amount: int = 0

    @field_validator("items")
    @classmethod
    def _freeze_items(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("items", mode="wrap")
    def _dump_items(self, value: Mapping[str, Any], handler: Any) -> Any:
        return handler(dict(value))

    def has_items(self) -> bool:
        return self.item_amount > 0


class XmlResponse(FrozenModel):
    """Typed search or navigation response."""

    servers: Servers = Field(default_factory=Servers)
    query: Query = Field(default_factory=Query)
    landing_page: Optional[LandingPage] = None
    promotion: Optional[Promotion] = None
    results_count: int = 0
    products: tuple[Product, ...] = ()
    filters: tuple[Filter, ...] = ()

    def get_filter(self, name: str) -> Optional[Filter]:
        """Get a filter by name, or None if the response has no such filter."""
        for result_filter in self.filters:
            if result_filter.name == name:
                return result_filter
        return None
