"""Maps search and navigation XML payloads onto XmlResponse.

Absent elements never fail the parse; they fall back to the model
defaults. Only a document that is not well-formed XML raises.
"""

from typing import Optional
from xml.etree import ElementTree

from ...core.exceptions import ResponseParseError
from ...core.schemas.xml_response import (
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
from ...observability.logger import get_logger
from .coercion import to_bool, to_float, to_int

logger = get_logger(__name__)


def parse_xml_response(payload: str | bytes) -> XmlResponse:
    """
    Parse a search or navigation response.

    Args:
        payload: Raw XML document

    Returns:
        XmlResponse

    Raises:
        ResponseParseError: If the payload is not well-formed XML
    """
    try:
        root = ElementTree.fromstring(payload)
    except ElementTree.ParseError as e:
        logger.warning("Malformed XML response", error=str(e))
        raise ResponseParseError(f"Invalid XML response: {e}") from e

    results = root.find("results")

    return XmlResponse(
        servers=_parse_servers(root.find("servers")),
        query=_parse_query(root.find("query")),
        landing_page=_parse_landing_page(root.find("landingPage")),
        promotion=_parse_promotion(root.find("promotion")),
        results_count=to_int(_text(results, "count")) or 0,
        products=[_parse_product(el) for el in root.findall("./products/product")],
        filters=[_parse_filter(el) for el in root.findall("./filters//filter")],
    )


def _text(element: Optional[ElementTree.Element], tag: str) -> Optional[str]:
    """Get stripped text of a child element, None if it is missing or empty."""
    if element is None:
        return None
    child = element.find(tag)
    if child is not None and child.text:
        return child.text.strip()
    return None


def _value(element: ElementTree.Element, name: str) -> Optional[str]:
    """Read a property given either as attribute or as child element."""
    value = element.get(name)
    if value is not None:
        return value.strip()
    return _text(element, name)


def _parse_servers(element: Optional[ElementTree.Element]) -> Servers:
    return Servers(
        frontend=_text(element, "frontend") or "",
        backend=_text(element, "backend") or "",
    )


def _parse_query(element: Optional[ElementTree.Element]) -> Query:
    if element is None:
        return Query()

    limit = element.find("limit")
    if limit is None:
        limit = ElementTree.Element("limit")
    original = element.find("originalQuery")

    return Query(
        first=to_int(limit.get("first")) or 0,
        count=to_int(limit.get("count")) or 0,
        query_string=_text(element, "queryString") or "",
        original_query=_text(element, "originalQuery"),
        allow_override=(
            to_bool(original.get("allow-override")) if original is not None else False
        ),
        did_you_mean_query=_text(element, "didYouMeanQuery"),
        searched_word_count=to_int(_text(element, "searchedWordCount")) or 0,
        found_word_count=to_int(_text(element, "foundWordCount")) or 0,
    )


def _parse_landing_page(
    element: Optional[ElementTree.Element],
) -> Optional[LandingPage]:
    if element is None:
        return None
    link = _value(element, "link")
    if not link:
        return None
    return LandingPage(link=link)


def _parse_promotion(element: Optional[ElementTree.Element]) -> Optional[Promotion]:
    if element is None:
        return None
    return Promotion(
        image=_value(element, "image") or "",
        link=_value(element, "link") or "",
    )


def _parse_product(element: ElementTree.Element) -> Product:
    properties = {
        prop.get("name", ""): (prop.text or "").strip()
        for prop in element.findall("./properties/property")
        if prop.get("name")
    }
    return Product(
        id=element.get("id", ""),
        relevance=to_float(element.get("relevance")) or 0.0,
        direct=to_bool(element.get("direct")),
        properties=properties,
    )


def _parse_range(element: Optional[ElementTree.Element]) -> Optional[Range]:
    if element is None:
        return None
    return Range(
        min=to_float(_text(element, "min")),
        max=to_float(_text(element, "max")),
    )


def _parse_attributes(element: ElementTree.Element) -> Attributes:
    return Attributes(
        selected_range=_parse_range(element.find("selectedRange")),
        total_range=_parse_range(element.find("totalRange")),
        step_size=to_float(_text(element, "stepSize")),
        unit=_text(element, "unit") or "",
    )


def _parse_items(element: Optional[ElementTree.Element]) -> tuple[dict[str, Item], int]:
    """Parse the <item> children of an <items> node.

    Returns the items keyed by name (last one wins on duplicates) and the
    number of <item> elements seen.
    """
    items: dict[str, Item] = {}
    amount = 0
    if element is None:
        return items, amount

    for item_element in element.findall("item"):
        item = _parse_item(item_element)
        items[item.name] = item
        amount += 1
    return items, amount


def _parse_item(element: ElementTree.Element) -> Item:
    nested, _ = _parse_items(element.find("items"))
    return Item(
        name=_text(element, "name") or "",
        weight=to_float(_text(element, "weight")),
        frequency=to_int(_text(element, "frequency")),
        image=_text(element, "image"),
        color=_text(element, "color"),
        selected=to_bool(element.get("selected")),
        items=nested,
    )


def _parse_filter(element: ElementTree.Element) -> Filter:
    attributes = element.find("attributes")
    # Only the first <items> node holds the filter values
    items, amount = _parse_items(element.find("items"))

    return Filter(
        name=_text(element, "name") or "",
        display=_text(element, "display") or "",
        select=_text(element, "select") or "",
        selected_items=to_int(_text(element, "selectedItems")) or 0,
        type=_text(element, "type") or "",
        attributes=_parse_attributes(attributes) if attributes is not None else None,
        items=items,
        item_amount=amount,
    )
